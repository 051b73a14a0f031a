import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ToolCallLog",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("duration_ms", models.PositiveIntegerField(blank=True, null=True)),
                (
                    "run_id",
                    models.CharField(blank=True, db_index=True, max_length=255),
                ),
                ("tool_name", models.CharField(max_length=64)),
                ("arguments", models.JSONField(default=list)),
                ("output", models.TextField(blank=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("success", "Success"), ("error", "Error")],
                        db_index=True,
                        default="success",
                        max_length=32,
                    ),
                ),
                (
                    "error_type",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                ("error_message", models.TextField(blank=True)),
            ],
            options={
                "verbose_name": "Tool Call Log",
                "verbose_name_plural": "Tool Call Logs",
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddIndex(
            model_name="toolcalllog",
            index=models.Index(
                fields=["created_at"], name="tool_calllog_created_idx"
            ),
        ),
        migrations.AddIndex(
            model_name="toolcalllog",
            index=models.Index(
                fields=["tool_name", "created_at"], name="tool_calllog_tool_created_idx"
            ),
        ),
    ]
