from store_registry.models import Store
from store_registry.repository import Repo


def named(*names):
    return [Store(n, "addr", "spec", "9-18") for n in names]


def test_iteration_follows_insertion_order():
    repo = Repo()
    stores = named("a", "b", "c", "b")
    for s in stores:
        repo.add(s)
    assert list(repo) == stores
    # restartable
    assert list(repo) == stores
    assert len(repo) == 4


def test_empty_repo_iterates_nothing():
    assert list(Repo()) == []
    assert len(Repo()) == 0


def test_remove_where_keeps_survivor_order():
    stores = named("a", "x1", "b", "x2", "c")
    repo = Repo(stores)
    removed = repo.remove_where(lambda s: s.name.startswith("x"))
    assert removed == 2
    assert [s.name for s in repo] == ["a", "b", "c"]


def test_remove_where_head_and_tail():
    repo = Repo(named("x", "x", "a", "x"))
    assert repo.remove_where(lambda s: s.name == "x") == 3
    assert [s.name for s in repo] == ["a"]


def test_remove_where_everything_leaves_empty_iteration():
    repo = Repo(named("a", "b"))
    assert repo.remove_where(lambda s: True) == 2
    assert list(repo) == []
    repo.add(named("c")[0])
    assert [s.name for s in repo] == ["c"]


def test_remove_where_no_match():
    repo = Repo(named("a", "b"))
    assert repo.remove_where(lambda s: False) == 0
    assert [s.name for s in repo] == ["a", "b"]


def test_remove_by_name_removes_all_case_insensitive_matches():
    repo = Repo(named("X", "keep", "x"))
    assert repo.remove_by_name("x") == 2
    assert [s.name for s in repo] == ["keep"]


def test_featured_selects_only_matching_stores():
    good = Store("good", "a", "s", "24/7", phones=["1234", "380501112233"])
    no_hours = Store("hours", "a", "s", "8-20", phones=["1234", "380501112233"])
    no_short = Store("short", "a", "s", "24/7", phones=["380501112233"])
    no_domestic = Store("domestic", "a", "s", "24/7", phones=["1234"])
    repo = Repo([no_hours, good, no_short, no_domestic])
    assert repo.featured() == [good]
