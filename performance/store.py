# performance/store.py
"""
مخزن السجلات: كامل قائمة الموظفين كقيمة JSON واحدة تحت مفتاح ثابت.
لا يوجد تعديل جزئي: كل كتابة تستبدل اللقطة (snapshot) بالكامل.
"""
import logging
from typing import Iterable, Tuple

from django.conf import settings
from django.db import transaction

from base.models import KeyValueSlot
from performance.records import Employee, dump_employees, load_employees

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self, key=None):
        self._key = key

    @property
    def key(self) -> str:
        return self._key or settings.APPRAISAL_STORAGE_KEY

    def load(self) -> Tuple[Employee, ...]:
        return load_employees(KeyValueSlot.read(self.key, default=[]))

    @transaction.atomic
    def replace_all(self, employees: Iterable[Employee]) -> Tuple[Employee, ...]:
        snapshot = tuple(employees)
        KeyValueSlot.write(self.key, dump_employees(snapshot))
        logger.debug("Replaced record set under %r (%d employees).", self.key, len(snapshot))
        return snapshot


record_store = RecordStore()
