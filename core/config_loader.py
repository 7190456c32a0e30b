import yaml
import os
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///studymatch.db"


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class MatchingConfig(BaseModel):
    """
    Weights for the match scorer.

    score = sum(proficiency * urgency) over shared subjects (both directions)
            + department_bonus (same department, suggested matches only)
            + rating_weight * candidate.rating
    """
    department_bonus: float = 5.0
    rating_weight: float = 2.0
    suggested_top_k: int = 10  # Cap for dashboard suggestions; discovery is uncapped


class PointsConfig(BaseModel):
    """Point awards and milestone size for the points ledger."""
    welcome_bonus: int = 100
    tutor_completion: int = 50
    learner_completion: int = 30
    review: int = 10
    milestone: int = 1000


class SubjectSeed(BaseModel):
    id: str
    name: str
    category: str
    department: Optional[str] = None


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    points: PointsConfig = Field(default_factory=PointsConfig)
    log_level: str = "INFO"
    subjects: List[SubjectSeed] = Field(default_factory=list)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})
        data['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})
        data['web']['port'] = int(os.environ['WEB_PORT'])

    if 'LOG_LEVEL' in os.environ:
        data['log_level'] = os.environ['LOG_LEVEL']

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try next to the package
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data)
    return AppConfig(**data)
