import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


SKILL_MATCH_MAX_DISTANCE = _int_env("PLACEMENT_SKILL_MATCH_MAX_DISTANCE", 2)
TOP_MARKET_SKILLS = _int_env("PLACEMENT_TOP_MARKET_SKILLS", 15)
MAX_RESOURCE_SKILLS = _int_env("PLACEMENT_MAX_RESOURCE_SKILLS", 5)

LOG_LEVEL = os.getenv("PLACEMENT_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("PLACEMENT_CORS_ORIGINS", "*").split(",") if o.strip()]
