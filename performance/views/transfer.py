# -*- coding: utf-8 -*-
import logging

from django.http import HttpResponse
from django.views import View
from django.views.generic import FormView

from .mixins import AdminRequired, WorkflowMixin
from ..forms import ImportForm
from ..services.projection import project_rows
from ..services.spreadsheet import (
    CONTENT_TYPE, SpreadsheetFormatError, export_filename, read_workbook, write_workbook,
)
from ..store import record_store

logger = logging.getLogger(__name__)


class ExportView(AdminRequired, View):
    """تصدير كامل السجلات إلى Excel"""

    def get(self, request, *args, **kwargs):
        content = write_workbook(project_rows(record_store.load()))
        response = HttpResponse(content, content_type=CONTENT_TYPE)
        response["Content-Disposition"] = f'attachment; filename="{export_filename(request.appraisal.year)}"'
        return response


class ImportView(AdminRequired, WorkflowMixin, FormView):
    """استيراد Excel: يستبدل كامل السجلات"""
    form_class = ImportForm
    template_name = "performance/import_form.html"
    success_message = "تم استيراد البيانات بنجاح"
    success_url_name = "performance:employee_list"

    def form_valid(self, form):
        try:
            rows = read_workbook(form.cleaned_data["file"])
        except SpreadsheetFormatError as exc:
            logger.warning("Rejected import upload: %s", exc)
            form.add_error("file", str(exc))
            return self.form_invalid(form)
        result = self.workflow.import_rows(self.request.appraisal, rows)
        return self.report(result)
