# -*- coding: utf-8 -*-
# هذا الملف يجمع جميع الفورمات داخل مجلد forms ليكون الاستيراد منظّمًا وسهلًا عبر باكج واحد

# مكسنات مشتركة (تنسيق Tailwind + إخفاء حقول المدير)
from .base import TailwindFormMixin, RoleScopedFormMixin

# فورم الموظف
from .employee_form import EmployeeForm

# فورم الهدف
from .goal_form import GoalForm

# فورم المهمة
from .task_form import TaskForm

# فورم التقييم/تحديث التنفيذ
from .evaluation_form import EvaluationForm

# الاستيراد + خطوة التأكيد
from .transfer_form import ImportForm, ConfirmForm


# تصدير الأسماء العامة للاستيراد المختصر من الخارج
__all__ = [
    # Mixins
    "TailwindFormMixin",
    "RoleScopedFormMixin",

    "EmployeeForm",
    "GoalForm",
    "TaskForm",
    "EvaluationForm",
    "ImportForm",
    "ConfirmForm",
]
