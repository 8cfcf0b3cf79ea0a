# -*- coding: utf-8 -*-
from django import forms


class TailwindFormMixin:
    """
    يضيف أصناف Tailwind/DaisyUI المناسبة لكل الحقول تلقائيًا
    للحفاظ على اتساق الواجهات بين الشاشات.
    """
    base_input_cls = "input input-bordered w-full"
    base_select_cls = "select select-bordered w-full"
    base_textarea_cls = "textarea textarea-bordered w-full"
    base_file_cls = "file-input file-input-bordered w-full"

    def _style_field(self, name, field):
        w = field.widget
        # نص متعدد الأسطر
        if isinstance(w, forms.Textarea):
            w.attrs.setdefault("class", self.base_textarea_cls)
            return
        # سيلكت
        if isinstance(w, forms.Select):
            w.attrs.setdefault("class", self.base_select_cls)
            return
        # ملف
        if isinstance(w, forms.FileInput):
            w.attrs.setdefault("class", self.base_file_cls)
            return
        # شيك/مخفي: نتركها كما هي
        if isinstance(w, (forms.CheckboxInput, forms.HiddenInput)):
            return
        # افتراضي (نص/رقم…)
        w.attrs.setdefault("class", self.base_input_cls)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name, field in self.fields.items():
            self._style_field(name, field)


class RoleScopedFormMixin:
    """
    يسمح بتمرير الدور الحالي لإخفاء الحقول الخاصة بالمدير.
    - مرّره من الـ View عبر: MyForm(is_admin=request.appraisal.is_admin, ...)
    """
    admin_only_fields: tuple = ()

    def __init__(self, *args, **kwargs):
        self.is_admin = kwargs.pop("is_admin", False)
        super().__init__(*args, **kwargs)
        if not self.is_admin:
            for fname in self.admin_only_fields:
                self.fields.pop(fname, None)
