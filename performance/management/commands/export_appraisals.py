# performance/management/commands/export_appraisals.py

from pathlib import Path

from django.core.management.base import BaseCommand

from performance.services.projection import project_rows
from performance.services.spreadsheet import write_workbook
from performance.store import record_store


class Command(BaseCommand):
    help = "Export all appraisal records to an .xlsx workbook."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Destination .xlsx file.")

    def handle(self, *args, **options):
        rows = project_rows(record_store.load())
        Path(options["path"]).write_bytes(write_workbook(rows))
        self.stdout.write(self.style.SUCCESS(f"Exported {len(rows)} rows to {options['path']}."))
