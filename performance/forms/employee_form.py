# -*- coding: utf-8 -*-
from django import forms

from .base import TailwindFormMixin


class EmployeeForm(TailwindFormMixin, forms.Form):
    """فورم إضافة موظف (مدير فقط)"""
    name = forms.CharField(label="اسم الموظف", max_length=255)
    position = forms.CharField(label="المسمى الوظيفي", max_length=255)
