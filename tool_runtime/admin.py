from django.contrib import admin

from tool_runtime.models import ToolCallLog


@admin.register(ToolCallLog)
class ToolCallLogAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "tool_name",
        "status",
        "error_type",
        "duration_ms",
        "created_at",
    ]
    list_filter = ["status", "tool_name"]
    search_fields = ["run_id", "tool_name", "error_type"]
    readonly_fields = [
        "id",
        "created_at",
        "duration_ms",
        "run_id",
        "tool_name",
        "arguments",
        "output",
        "status",
        "error_type",
        "error_message",
    ]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
