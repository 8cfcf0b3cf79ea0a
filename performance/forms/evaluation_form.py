# -*- coding: utf-8 -*-
from django import forms

from .base import RoleScopedFormMixin, TailwindFormMixin


class EvaluationForm(RoleScopedFormMixin, TailwindFormMixin, forms.Form):
    """
    فورم التقييم/تحديث التنفيذ:
    - تفاصيل التنفيذ مطلوبة للجميع
    - النسبة النهائية (0..100) والاعتماد للمدير فقط
    """
    admin_only_fields = ("rating", "approved")

    outcome = forms.CharField(
        label="تفاصيل التنفيذ وما تم إنجازه",
        widget=forms.Textarea(attrs={"rows": 4, "placeholder": "اكتب هنا تفاصيل ما تم تنفيذه..."}),
    )
    rating = forms.IntegerField(label="نسبة الإنجاز النهائية (%)", min_value=0, max_value=100)
    approved = forms.BooleanField(label="اعتماد التنفيذ رسميًا", required=False)

    @classmethod
    def initial_for(cls, item):
        return {
            "outcome": item.actual_outcome or "",
            "rating": item.final_rating,
            "approved": bool(item.is_approved),
        }
