# -*- coding: utf-8 -*-
from django import forms

from .base import TailwindFormMixin


class GoalForm(TailwindFormMixin, forms.Form):
    """فورم الهدف الاستراتيجي: السنة تؤخذ من السنة المختارة في الجلسة"""
    title = forms.CharField(
        label="وصف الهدف",
        widget=forms.Textarea(attrs={"rows": 3, "placeholder": "وصف الهدف الاستراتيجي..."}),
    )
