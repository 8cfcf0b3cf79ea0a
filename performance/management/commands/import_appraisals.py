# performance/management/commands/import_appraisals.py

from django.core.management.base import BaseCommand, CommandError

from base.session_context import Role, SessionContext, current_year
from performance.services.spreadsheet import SpreadsheetFormatError, read_workbook
from performance.services.workflow import workflow


class Command(BaseCommand):
    help = "Replace all appraisal records with the content of an .xlsx workbook."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Path to the .xlsx file.")
        parser.add_argument(
            "--year", type=int, default=None,
            help="Year used for rows without a valid year (default: current year).",
        )

    def handle(self, *args, **options):
        try:
            rows = read_workbook(options["path"])
        except SpreadsheetFormatError as exc:
            raise CommandError(str(exc)) from exc

        ctx = SessionContext(
            role=Role.ADMIN,
            display_name="manage.py",
            year=options["year"] or current_year(),
        )
        self.stdout.write(f"Importing {len(rows)} rows (default year {ctx.year}) ...")

        result = workflow.import_rows(ctx, rows)
        goals = sum(len(e.goals) for e in result.employees)
        tasks = sum(len(g.tasks) for e in result.employees for g in e.goals)
        self.stdout.write(self.style.SUCCESS(
            f"Done: {len(result.employees)} employees, {goals} goals, {tasks} tasks."
        ))
