# base/apps.py
from django.apps import AppConfig
import logging


logger = logging.getLogger(__name__)


class BaseConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "base"
    verbose_name = "Base"

    def ready(self):
        # نتحقق مبكرًا من إعدادات بوابة الدخول حتى لا تظهر المشكلة عند أول محاولة دخول
        from django.conf import settings

        if not getattr(settings, "APPRAISAL_ADMIN_USERNAME", ""):
            logger.warning("APPRAISAL_ADMIN_USERNAME is empty; administrator login is disabled.")
