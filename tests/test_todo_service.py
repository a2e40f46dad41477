from mintodo.db.repositories.todos import TodoRepository
from mintodo.features.todos.results import Created, NoContent, NotFound, Ok
from mintodo.features.todos.services import TodoService


def _svc(session):
    return TodoService(TodoRepository(session))


def test_create_returns_created_with_detail_route(session):
    result = _svc(session).create("lire")
    assert isinstance(result, Created)
    assert result.entity.id is not None
    assert result.entity.description == "lire"
    assert result.route_name == "TodoDetails"
    assert result.path_params == {"todo_id": result.entity.id}


def test_missing_id_is_not_found_everywhere(session):
    svc = _svc(session)
    assert svc.get(123) == NotFound()
    assert svc.update(123, description="x") == NotFound()
    assert svc.delete(123) == NotFound()


def test_update_and_delete_results(session):
    svc = _svc(session)
    todo = svc.create("v1").entity

    updated = svc.update(todo.id, description="v2")
    assert isinstance(updated, Ok)
    assert (updated.value.id, updated.value.description) == (todo.id, "v2")

    assert svc.delete(todo.id) == NoContent()
    assert svc.get(todo.id) == NotFound()


def test_list_returns_all_rows(session):
    svc = _svc(session)
    for d in ("a", "b", "c"):
        svc.create(d)
    result = svc.list()
    assert isinstance(result, Ok)
    assert sorted(t.description for t in result.value) == ["a", "b", "c"]


def test_id_beyond_integer_column_is_not_found(session):
    svc = _svc(session)
    huge = 2**64
    assert svc.get(huge) == NotFound()
    assert svc.update(huge, description="x") == NotFound()
    assert svc.delete(huge) == NotFound()
