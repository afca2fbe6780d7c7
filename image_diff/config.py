from __future__ import annotations
from dataclasses import dataclass, asdict
from pathlib import Path
import os

from dotenv import load_dotenv

from .errors import ConfigError

# Load environment variables
load_dotenv()

OUTPUT_DIR_NAME = "diff_image_output"
EXPORT_KEY = "GENERATED_DIFF_IMAGES_DIR"
IMAGE_EXT = ".png"


@dataclass
class StepConfig:
    """
    Inputs of the diff step. Read from the environment (and .env), the way
    the CI system hands inputs to a step.
    """
    before_images: str
    after_images: str
    source_dir: str = "."
    output_dir_name: str = OUTPUT_DIR_NAME
    image_ext: str = IMAGE_EXT
    export_key: str = EXPORT_KEY
    publisher: str = "envman"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, **overrides) -> StepConfig:
        """
        Build the config from environment variables. Keyword arguments that
        are not None win over the environment.
        """
        values = {
            "before_images": os.getenv("before_images", ""),
            "after_images": os.getenv("after_images", ""),
            "source_dir": os.getenv("BITRISE_SOURCE_DIR") or os.getcwd(),
            "output_dir_name": os.getenv("DIFF_IMAGE_OUTPUT_DIR_NAME", OUTPUT_DIR_NAME),
            "image_ext": os.getenv("DIFF_IMAGE_EXT", IMAGE_EXT),
            "export_key": os.getenv("DIFF_IMAGES_EXPORT_KEY", EXPORT_KEY),
            "publisher": os.getenv("DIFF_IMAGES_PUBLISHER", "envman"),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        config = cls(**values)
        config.validate()
        return config

    def validate(self) -> None:
        missing = [name for name in ("before_images", "after_images") if not getattr(self, name)]
        if missing:
            raise ConfigError(f"Required input(s) not set: {', '.join(missing)}")
        if not self.image_ext.startswith(".") or len(self.image_ext) < 2:
            raise ConfigError(f"Image extension must look like '.png', got {self.image_ext!r}")

    @property
    def output_dir(self) -> Path:
        return (Path(self.source_dir) / self.output_dir_name).absolute()

    def describe(self) -> str:
        lines = ["Configs:"]
        lines += [f"- {key}: {value}" for key, value in asdict(self).items()]
        return "\n".join(lines)
