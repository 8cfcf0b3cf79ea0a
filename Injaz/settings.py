"""
Django settings for Injaz project.
"""

# استخدام مكتبة django-environ لقراءة القيم من .env
import environ
from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent


# تعريف env مع قيم افتراضية
# القيم الحساسة مثل SECRET_KEY, DB_PASSWORD → لا علاقة لها بـ default.
env = environ.Env(
    DEBUG=(bool, False),
    DB_PORT=(int, 5432),
    LOG_LEVEL=(str, "INFO"),
)

# تحميل ملف .env
environ.Env.read_env(os.path.join(BASE_DIR, ".env"))

# ========== Debug ==========
DEBUG = env("DEBUG")
SECRET_KEY = env("SECRET_KEY")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])

# ========== Database ==========
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": env("DB_NAME", default="injaz"),
        "USER": env("DB_USER", default="injaz"),
        "PASSWORD": env("DB_PASSWORD", default=""),
        "HOST": env("DB_HOST", default="localhost"),
        "PORT": env("DB_PORT"),
    }
}

# ========== Appraisal ==========
# بوابة الدخول ثابتة: زوج بيانات للمدير، والموظف يدخل باسمه فقط
APPRAISAL_ADMIN_USERNAME = env("APPRAISAL_ADMIN_USERNAME", default="admin")
APPRAISAL_ADMIN_PASSWORD = env("APPRAISAL_ADMIN_PASSWORD", default="123")
APPRAISAL_ADMIN_DISPLAY_NAME = env("APPRAISAL_ADMIN_DISPLAY_NAME", default="المدير العام")

# المفتاح الثابت الذي تُخزَّن تحته كامل قائمة الموظفين
APPRAISAL_STORAGE_KEY = env("APPRAISAL_STORAGE_KEY", default="hr_performance_system_v3")


# -------------------------------------------------
# Applications
#  ملاحظة مهمة: ضع base قبل performance لأنه يعرّف مخزن المفاتيح وسياق الجلسة
# -------------------------------------------------
INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Project apps
    "base.apps.BaseConfig",
    "performance.apps.PerformanceConfig",
    "widget_tweaks",
]

# -------------------------------------------------
# Middleware
# -------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "base.middleware.AppraisalSessionMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# -------------------------------------------------
# URLs / WSGI
# -------------------------------------------------
ROOT_URLCONF = "Injaz.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [os.path.join(BASE_DIR, "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "base.context_processors.appraisal",
            ],
        },
    },
]

WSGI_APPLICATION = "Injaz.wsgi.application"


# -------------------------------------------------
# Auth
# -------------------------------------------------
# إذا حاول فتح أي رابط مباشر بدون تسجيل الدخول → يتحول تلقائيًا لصفحة تسجيل الدخول.
LOGIN_URL = "base:login"
LOGIN_REDIRECT_URL = "performance:home"

# -------------------------------------------------
# Password validation
# -------------------------------------------------
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# -------------------------------------------------
# I18N / TZ
# -------------------------------------------------
LANGUAGE_CODE = "ar"
TIME_ZONE = "Asia/Baghdad"
USE_I18N = True
USE_TZ = True

# -------------------------------------------------
# Static & Media
# -------------------------------------------------
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -------------------------------------------------
# Logging
# -------------------------------------------------
LOG_LEVEL = env("LOG_LEVEL")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{asctime} {levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "base": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "performance": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}

# -------------------------------------------------
# Dev helpers
# -------------------------------------------------
if DEBUG:
    INSTALLED_APPS += ["django_browser_reload"]
    MIDDLEWARE += ["django_browser_reload.middleware.BrowserReloadMiddleware"]
