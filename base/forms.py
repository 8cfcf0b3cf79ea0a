# base/forms.py
from django import forms


class LoginForm(forms.Form):
    """
    فورم الدخول: التحقق هنا يقتصر على الحقول المطلوبة،
    أما مطابقة البيانات فتتم في base.access.authenticate.
    """
    username = forms.CharField(label="اسم المستخدم", max_length=255)
    password = forms.CharField(label="كلمة المرور", widget=forms.PasswordInput, required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.widget.attrs.setdefault("class", "input input-bordered w-full")
