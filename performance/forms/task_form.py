# -*- coding: utf-8 -*-
from django import forms

from .base import TailwindFormMixin
from ..records import MONTHS


class TaskForm(TailwindFormMixin, forms.Form):
    """
    فورم المهمة (إضافة/تحرير):
    - الحقول الزمنية فقط؛ التقييم والاعتماد لهما فورم التقييم
    - عدد الأيام غير سالب، وفارغه يعني صفر
    """
    name = forms.CharField(label="اسم المهمة", max_length=255)
    estimated_days = forms.IntegerField(label="الزمن المقدر (أيام)", min_value=0, required=False, initial=0)
    expected_month = forms.ChoiceField(label="الشهر المتوقع", choices=[(m, m) for m in MONTHS])

    @classmethod
    def initial_for(cls, task):
        return {
            "name": task.name,
            "estimated_days": task.estimated_days,
            "expected_month": task.expected_month,
        }

    def clean_estimated_days(self):
        return self.cleaned_data.get("estimated_days") or 0
