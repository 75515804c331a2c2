"""
Task catalog - the predefined earn and spend tasks.
Read-only configuration, never persisted.
"""
from typing import Iterable, List, Optional, Tuple

from dodocoin.constants import EARN_TASKS, SPEND_TASKS
from dodocoin.exceptions import UnknownTaskException, ValidationException
from dodocoin.schemas import TaskDefinition


class TaskCatalog:
    """Catalog of tasks a user can apply to the ledger"""

    def __init__(
        self,
        earn: Optional[Iterable[Tuple[str, int]]] = None,
        spend: Optional[Iterable[Tuple[str, int]]] = None
    ):
        self.earn_tasks = self._build(EARN_TASKS if earn is None else earn, positive=True)
        self.spend_tasks = self._build(SPEND_TASKS if spend is None else spend, positive=False)

    @staticmethod
    def _build(entries: Iterable[Tuple[str, int]], positive: bool) -> List[TaskDefinition]:
        tasks = []
        for label, coins in entries:
            if positive and coins <= 0:
                raise ValidationException("coins", f"earn task '{label}' must have positive coins")
            if not positive and coins >= 0:
                raise ValidationException("coins", f"spend task '{label}' must have negative coins")
            tasks.append(TaskDefinition(label=label, coins=coins))
        return tasks

    def all_tasks(self) -> List[TaskDefinition]:
        """Earn tasks followed by spend tasks"""
        return self.earn_tasks + self.spend_tasks

    def find(self, label: str) -> TaskDefinition:
        """
        Find a task by label.

        Raises:
            UnknownTaskException: If no task has this label
        """
        for task in self.all_tasks():
            if task.label == label:
                return task
        raise UnknownTaskException(label)
