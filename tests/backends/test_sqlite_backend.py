import pytest

from backends.sqlite import SqliteCategoryBackend
from exceptions import DuplicateNameError, NotFoundError
from models.category import Category


@pytest.fixture
def backend(db_manager_with_schema):
    return SqliteCategoryBackend(db_manager_with_schema)


class TestSqliteCategoryBackend:
    """Tests for SqliteCategoryBackend."""

    def test_save_inserts_row(self, backend, test_db):
        """Test an insert writes a row with the returned identifier."""
        saved = backend.save(Category(name="Electronics"))

        row = test_db.execute(
            "SELECT id, name FROM categories WHERE id = ?", (saved.id,)
        ).fetchone()
        assert row == (saved.id, "Electronics")

    def test_find_all_ordered_by_id(self, backend):
        """Test find_all returns rows in identifier order."""
        for name in ("Zebra", "Alpha"):
            backend.save(Category(name=name))

        assert [c.name for c in backend.find_all()] == ["Zebra", "Alpha"]

    def test_find_by_id_not_found(self, backend):
        """Test looking up an unknown identifier returns None."""
        assert backend.find_by_id(9999) is None

    def test_find_by_name_case_sensitive(self, backend):
        """Test that name lookup is case-sensitive."""
        backend.save(Category(name="Shopping"))

        assert backend.find_by_name("shopping") is None
        assert backend.find_by_name("Shopping").name == "Shopping"

    def test_insert_duplicate_name_raises_error(self, backend):
        """Test the insert trigger is reported as DuplicateNameError."""
        backend.save(Category(name="Duplicate"))

        with pytest.raises(DuplicateNameError) as exc_info:
            backend.save(Category(name="Duplicate"))

        assert exc_info.value.name == "Duplicate"
        assert len(backend.find_all()) == 1

    def test_update_to_existing_name_is_allowed(self, backend):
        """Test the uniqueness trigger does not fire on update."""
        backend.save(Category(name="One"))
        two = backend.save(Category(name="Two"))

        updated = backend.save(Category(id=two.id, name="One"))

        assert updated == Category(id=two.id, name="One")

    def test_update_unknown_id_raises_error(self, backend):
        """Test updating a missing row raises NotFoundError."""
        with pytest.raises(NotFoundError):
            backend.save(Category(id=5, name="Missing"))

    def test_autoincrement_never_reuses_ids(self, backend):
        """Test the highest identifier is not reused after it is deleted."""
        backend.save(Category(name="a"))
        last = backend.save(Category(name="b"))
        backend.delete(last)

        again = backend.save(Category(name="c"))

        assert again.id == last.id + 1

    def test_delete_removes_row(self, backend):
        """Test delete removes the row."""
        saved = backend.save(Category(name="Temp"))

        backend.delete(saved)

        assert backend.find_by_id(saved.id) is None
