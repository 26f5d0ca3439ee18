from dataclasses import dataclass


@dataclass
class Settings:
    threshold: float = 2.0
    precision: int = 2
    report_version: str = "1.0"

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {self.threshold}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
