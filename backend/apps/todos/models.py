"""
Todo models - per-user to-do items.
"""

from django.db import models

from apps.core.models import TimestampedModel


class Todo(TimestampedModel):
    """
    A single to-do item.

    Always read and written through a filter on ``user`` so one user can
    never see or change another user's items.
    """

    user = models.ForeignKey(
        "accounts.User",
        on_delete=models.CASCADE,
        related_name="todos",
        help_text="User who owns this todo",
    )
    description = models.CharField(max_length=250)
    completed = models.BooleanField(default=False)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["user", "completed"], name="todo_user_completed_idx"),
        ]

    def __str__(self) -> str:
        status = "x" if self.completed else " "
        return f"[{status}] {self.description}"
