"""Per-pair orchestration: load, diff, keep or discard, write."""

import pytest

from image_diff.models.image_pair import ImagePair
from image_diff.models.pair_outcome import PairStatus
from image_diff.pipeline.diff_generator import generate_diff_images

BLACK = (0, 0, 0, 255)


@pytest.fixture
def dirs(tmp_path):
    before, after, out = tmp_path / "before", tmp_path / "after", tmp_path / "out"
    for d in (before, after, out):
        d.mkdir()
    return before, after, out


def test_identical_pair_writes_nothing(dirs, solid, write_png):
    before, after, out = dirs
    write_png(before / "same.png", solid(4, 4))
    write_png(after / "same.png", solid(4, 4))

    run = generate_diff_images([ImagePair(before / "same.png", after / "same.png")], out)

    assert [o.status for o in run.outcomes] == [PairStatus.DISCARDED]
    assert list(out.iterdir()) == []


def test_changed_pair_writes_one_file(dirs, solid, write_png):
    before, after, out = dirs
    changed = solid(4, 4)
    changed[2] = BLACK
    write_png(before / "home.png", solid(4, 4))
    write_png(after / "home.png", changed)

    run = generate_diff_images([ImagePair(before / "home.png", after / "home.png")], out)

    assert len(run.kept) == 1
    assert run.kept[0].output_path == out / "home.png"
    assert [p.name for p in out.iterdir()] == ["home.png"]


def test_added_image_uses_placeholder(dirs, solid, write_png):
    before, after, out = dirs
    write_png(after / "new.png", solid(3, 3))

    run = generate_diff_images([ImagePair(before / "new.png", after / "new.png")], out)

    assert run.failed == []
    assert [o.status for o in run.outcomes] == [PairStatus.KEPT]
    assert (out / "new.png").exists()


def test_one_broken_pair_does_not_stop_the_others(dirs, solid, write_png):
    before, after, out = dirs
    (before / "a.png").write_bytes(b"garbage")
    write_png(after / "a.png", solid(2, 2))
    write_png(after / "b.png", solid(2, 2))
    pairs = [
        ImagePair(before / "a.png", after / "a.png"),
        ImagePair(before / "b.png", after / "b.png"),
    ]

    run = generate_diff_images(pairs, out)

    assert [o.status for o in run.outcomes] == [PairStatus.FAILED, PairStatus.KEPT]
    assert "a.png" in run.failed[0].reason
    assert run.has_failures
    assert (out / "b.png").exists()


def test_write_failure_is_recorded(tmp_path, solid, write_png):
    write_png(tmp_path / "after" / "x.png", solid(2, 2))
    pair = ImagePair(tmp_path / "before" / "x.png", tmp_path / "after" / "x.png")

    run = generate_diff_images([pair], tmp_path / "missing_out")

    assert [o.status for o in run.outcomes] == [PairStatus.FAILED]


def test_truncated_after_with_same_bounds_writes_nothing(dirs, solid, write_png):
    before, after, out = dirs
    full = solid(4, 3)
    full[2:] = BLACK
    write_png(before / "s.png", full)
    write_png(after / "s.png", full[:2].copy())

    run = generate_diff_images([ImagePair(before / "s.png", after / "s.png")], out)

    assert [o.status for o in run.outcomes] == [PairStatus.DISCARDED]
    assert list(out.iterdir()) == []
