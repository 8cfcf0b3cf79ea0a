# base/models.py
from django.db import models


# ---------- أساسية (وقت) ----------
class TimeStampedMixin(models.Model):
    """ختم إنشـاء/تعديل مع فهارس."""
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        abstract = True


# ---------- مخزن مفتاح/قيمة ----------
class KeyValueSlot(TimeStampedMixin):
    """
    خانة تخزين دائمة: قيمة JSON واحدة تحت مفتاح ثابت.
    تُستبدل القيمة كاملة في كل كتابة (لا يوجد تعديل جزئي).
    """
    key = models.CharField(max_length=128, unique=True)
    payload = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "base_key_value_slot"
        ordering = ["key"]

    def __str__(self):
        return self.key

    @classmethod
    def read(cls, key, default=None):
        slot = cls.objects.filter(key=key).only("payload").first()
        return slot.payload if slot else default

    @classmethod
    def write(cls, key, payload):
        slot, _ = cls.objects.update_or_create(key=key, defaults={"payload": payload})
        return slot
