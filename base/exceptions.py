# base/exceptions.py


class AuthFailure(Exception):
    """بيانات الدخول لا تطابق المدير ولا أي موظف."""

    def __init__(self, username=""):
        self.username = username
        super().__init__("Invalid login credentials.")
