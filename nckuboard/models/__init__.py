from .task import Task, TaskStatus
