from widgetdock.collection import WidgetCollection
from widgetdock.errors import InvalidExtensionError


def test_add_from_path_appends_successes(memory_fs, memory_loader):
    memory_fs.add("/w/clock.wg", '{"name": "Clock"}')
    memory_fs.add("/w/notes.txt", '{"name": "Notes"}')
    collection = WidgetCollection(loader=memory_loader)

    assert collection.add_from_path("/w/clock.wg").ok
    result = collection.add_from_path("/w/notes.txt")

    assert isinstance(result.error, InvalidExtensionError)
    assert [w.name for w in collection] == ["Clock"]
    assert len(collection) == 1


def test_add_from_folder(memory_fs, memory_loader):
    memory_fs.add("/w/b.wg", '{"name": "b"}')
    memory_fs.add("/w/a.wg", '{"name": "A"}')
    collection = WidgetCollection(loader=memory_loader)

    assert collection.add_from_folder("/w") == 2
    assert collection.add_from_folder("/missing") == 0
    assert [w.name for w in collection] == ["A", "b"]


def test_select_and_remove(memory_fs, memory_loader):
    memory_fs.add("/w/a.wg", '{"name": "A"}')
    memory_fs.add("/w/b.wg", '{"name": "B"}')
    collection = WidgetCollection(loader=memory_loader)
    a = collection.add_from_path("/w/a.wg").unwrap()
    b = collection.add_from_path("/w/b.wg").unwrap()

    assert collection.select(a.id) is a
    assert collection.find(b.id) is b

    collection.remove(b)
    assert collection.selected is a
    assert collection.find(b.id) is None

    collection.remove(a)
    assert collection.selected is None
    assert len(collection) == 0


def test_select_none_clears_selection(memory_fs, memory_loader):
    memory_fs.add("/w/a.wg", '{"name": "A"}')
    collection = WidgetCollection(loader=memory_loader)
    a = collection.add_from_path("/w/a.wg").unwrap()
    collection.select(a.id)

    assert collection.select(None) is None
    assert collection.selected is None
