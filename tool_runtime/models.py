import uuid

from django.db import models


class ToolCallLog(models.Model):
    """Per-call log for observability and debugging of tool invocations."""

    class Status(models.TextChoices):
        SUCCESS = "success", "Success"
        ERROR = "error", "Error"

    # Identity
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    duration_ms = models.PositiveIntegerField(null=True, blank=True)
    run_id = models.CharField(max_length=255, blank=True, db_index=True)

    # Request
    tool_name = models.CharField(max_length=64)
    arguments = models.JSONField(default=list)  # [{type, value}, ...]

    # Response
    output = models.TextField(blank=True)  # ToolOutput JSON, e.g. {"double": 3.0}

    # Status / errors
    status = models.CharField(
        max_length=32,
        choices=Status.choices,
        default=Status.SUCCESS,
        db_index=True,
    )
    error_type = models.CharField(max_length=255, blank=True, null=True)
    error_message = models.TextField(blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="tool_calllog_created_idx"),
            models.Index(fields=["tool_name", "created_at"], name="tool_calllog_tool_created_idx"),
        ]
        verbose_name = "Tool Call Log"
        verbose_name_plural = "Tool Call Logs"

    def __str__(self):
        return f"{self.tool_name} @ {self.created_at} ({self.status})"


__all__ = ["ToolCallLog"]
