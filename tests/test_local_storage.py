from attendance_widget.services.local_storage import LocalStorage


def test_get_missing_key(storage):
    assert storage.get_item("nothing") is None


def test_set_and_get(storage):
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    assert storage.get_item("a") == "1"
    assert storage.get_item("b") == "2"


def test_persists_across_instances(tmp_path):
    """別インスタンスからも読めること"""
    path = str(tmp_path / "nested" / "store.json")
    LocalStorage(path).set_item("key", "value")
    assert LocalStorage(path).get_item("key") == "value"


def test_corrupted_file(tmp_path):
    """壊れたファイルは空として扱うこと"""
    path = tmp_path / "store.json"
    path.write_text("[1, 2", encoding="utf-8")
    storage = LocalStorage(str(path))
    assert storage.get_item("a") is None
    storage.set_item("a", "1")
    assert storage.get_item("a") == "1"
