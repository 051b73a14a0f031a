import os
import sys

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
app = Celery("tool_runtime_project")
app.config_from_object("django.conf:settings", namespace="CELERY")
# Prefork pool causes PermissionError on Windows (billiard semaphores). Use solo.
if sys.platform == "win32":
    app.conf.worker_pool = "solo"
# Picks up tool_runtime.tasks.
app.autodiscover_tasks()
