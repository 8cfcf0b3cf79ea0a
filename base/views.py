# base/views.py
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .access import authenticate
from .exceptions import AuthFailure
from .forms import LoginForm
from .session_context import end_session, start_session


def login_view(request):
    if request.appraisal.is_authenticated:
        return redirect("performance:home")
    form = LoginForm(data=request.POST or None)
    if request.method == "POST" and form.is_valid():
        # استيراد محلي لتجنب الدوران بين التطبيقين
        from performance.store import record_store

        try:
            identity = authenticate(
                form.cleaned_data["username"],
                form.cleaned_data.get("password") or "",
                record_store.load(),
            )
        except AuthFailure:
            form.add_error(None, "خطأ في بيانات الدخول")
        else:
            start_session(request, identity)
            next_url = request.GET.get("next") or request.POST.get("next")
            # لا إعادة توجيه خارج الموقع
            if not url_has_allowed_host_and_scheme(
                next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
            ):
                next_url = None
            return redirect(next_url or "performance:home")
    return render(request, "base/users/login.html", {"form": form})


@require_POST
def logout_view(request):
    end_session(request)
    return redirect("base:login")
