"""
Tests for TaskCatalog.
"""
import pytest

from dodocoin.exceptions import UnknownTaskException, ValidationException
from dodocoin.services.catalog_service import TaskCatalog


class TestTaskCatalog:
    """Tests for the task catalog"""

    def test_default_catalog(self):
        """Six earn and six spend tasks with the right signs"""
        catalog = TaskCatalog()

        assert len(catalog.earn_tasks) == 6
        assert len(catalog.spend_tasks) == 6
        assert all(t.coins > 0 for t in catalog.earn_tasks)
        assert all(t.coins < 0 for t in catalog.spend_tasks)

    def test_find_by_label(self):
        task = TaskCatalog().find("Workout")

        assert task.coins == 15

    def test_find_unknown_raises(self):
        with pytest.raises(UnknownTaskException) as exc:
            TaskCatalog().find("Nap")

        assert exc.value.label == "Nap"

    def test_custom_catalog(self):
        catalog = TaskCatalog(earn=[("Read", 4)], spend=[("Games", -6)])

        assert [t.label for t in catalog.all_tasks()] == ["Read", "Games"]

    @pytest.mark.parametrize("earn,spend", [
        ([("Read", -4)], []),
        ([("Read", 0)], []),
        ([], [("Games", 6)]),
    ])
    def test_wrong_sign_is_rejected(self, earn, spend):
        """Earn tasks must be positive and spend tasks negative"""
        with pytest.raises(ValidationException):
            TaskCatalog(earn=earn, spend=spend)
