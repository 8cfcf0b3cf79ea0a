# -*- coding: utf-8 -*-
from django import forms

from .base import TailwindFormMixin


class ImportForm(TailwindFormMixin, forms.Form):
    """
    استيراد Excel:
    - يستبدل كامل السجلات الحالية (لا يدمج)، لذلك يُطلب تأكيد صريح
    """
    file = forms.FileField(label="ملف Excel (.xlsx)")
    confirm_replace = forms.BooleanField(
        label="أفهم أن الاستيراد يستبدل جميع السجلات الحالية",
        required=True,
    )

    def clean_file(self):
        f = self.cleaned_data["file"]
        if not f.name.lower().endswith(".xlsx"):
            raise forms.ValidationError("Only .xlsx workbooks are supported.")
        return f


class ConfirmForm(forms.Form):
    """خطوة التأكيد (حذف هدف / اعتماد نهائي)"""
    confirm = forms.BooleanField(required=False)
