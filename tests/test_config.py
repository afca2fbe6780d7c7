import pytest

from image_diff.config import StepConfig
from image_diff.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "before_images", "after_images", "BITRISE_SOURCE_DIR", "DIFF_IMAGE_OUTPUT_DIR_NAME",
        "DIFF_IMAGE_EXT", "DIFF_IMAGES_EXPORT_KEY", "DIFF_IMAGES_PUBLISHER", "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_reads_inputs_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("before_images", "shots/before")
    monkeypatch.setenv("after_images", "shots/after")
    monkeypatch.setenv("BITRISE_SOURCE_DIR", str(tmp_path))

    config = StepConfig.from_env()

    assert config.before_images == "shots/before"
    assert config.after_images == "shots/after"
    assert config.export_key == "GENERATED_DIFF_IMAGES_DIR"
    assert config.publisher == "envman"
    assert config.output_dir == tmp_path / "diff_image_output"


def test_overrides_win(monkeypatch):
    monkeypatch.setenv("before_images", "env/before")
    monkeypatch.setenv("after_images", "env/after")

    config = StepConfig.from_env(before_images="cli/before", publisher=None)

    assert config.before_images == "cli/before"
    assert config.after_images == "env/after"
    assert config.publisher == "envman"


def test_source_dir_defaults_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    config = StepConfig.from_env(before_images="b", after_images="a")

    assert config.output_dir == tmp_path.absolute() / "diff_image_output"
    assert config.output_dir.is_absolute()


def test_missing_required_input(monkeypatch):
    monkeypatch.setenv("after_images", "a")

    with pytest.raises(ConfigError, match="before_images"):
        StepConfig.from_env()


def test_describe_lists_every_input():
    text = StepConfig(before_images="b", after_images="a").describe()

    assert "- before_images: b" in text
    assert "- after_images: a" in text


def test_image_extension_comes_from_environment(monkeypatch):
    monkeypatch.setenv("DIFF_IMAGE_EXT", ".webp")

    config = StepConfig.from_env(before_images="b", after_images="a")

    assert config.image_ext == ".webp"
    assert "- image_ext: .webp" in config.describe()


def test_image_extension_defaults_to_png():
    assert StepConfig.from_env(before_images="b", after_images="a").image_ext == ".png"


def test_malformed_image_extension(monkeypatch):
    monkeypatch.setenv("DIFF_IMAGE_EXT", "png")

    with pytest.raises(ConfigError, match="extension"):
        StepConfig.from_env(before_images="b", after_images="a")
