from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List

from looseorder.render import RecordRenderer
from looseorder.sequencer import Sequencer, field_getter
from looseorder.utils import data, timings

from .command import Command, Fail, register

log = logging.getLogger("sort")


@register
class Sort(Command):
    "Sort a list of records according to their 'before' hints"

    @classmethod
    def add_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().add_subparser(subparsers)
        parser.add_argument("file", help="YAML, JSON or TOML file with the records to sort (- for stdin)")
        parser.add_argument("-i", "--input-format", choices=("yaml", "json", "toml"),
                            help="format of the input file (default: guessed from the extension, or yaml)")
        parser.add_argument("-f", "--format", choices=("yaml", "json", "toml", "lines"),
                            help="format to use for output. Overrides settings.OUTPUT_FORMAT")
        parser.add_argument("-t", "--template",
                            help="jinja2 template used to print each record. Overrides settings.RECORD_TEMPLATE")
        return parser

    def read(self) -> List[Any]:
        fmt = self.args.input_format or data.guess_format(self.args.file) or "yaml"
        with self.open_input(self.args.file) as fd:
            try:
                return data.read_records(fd, fmt)
            except ValueError as e:
                raise Fail(f"{self.args.file}: {e}")

    def write(self, records: List[Any]) -> None:
        template = self.args.template or self.settings.RECORD_TEMPLATE
        if template:
            try:
                renderer = RecordRenderer(self.settings, template)
            except ValueError as e:
                raise Fail(str(e))
            for line in renderer.render_all(records):
                print(line)
            return

        fmt = self.args.format or self.settings.OUTPUT_FORMAT
        if fmt == "lines":
            get_id = field_getter(self.settings.ID_FIELD)
            for record in records:
                ident = get_id(record)
                print(record if ident is None else ident)
            return

        try:
            sys.stdout.write(data.write(records, fmt))
        except ValueError as e:
            raise Fail(str(e))

    def run(self) -> None:
        records = self.read()
        sequencer = Sequencer.from_settings(self.settings, diagnostics=self.diagnostics)
        with timings("Sorted in %fs: %d records", len(records)):
            records = sequencer.sequence(records)
        self.write(records)
        self.check_diagnostics()
