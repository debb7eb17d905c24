import os
from dotenv import load_dotenv

load_dotenv()

session_ttl_hours = float(os.getenv("SESSION_TTL_HOURS", "24"))
session_prune_interval_minutes = float(os.getenv("SESSION_PRUNE_INTERVAL_MINUTES", "60"))
log_level = os.getenv("LOG_LEVEL", "INFO").upper()

_round_seed = os.getenv("ROUND_SEED")
round_seed = int(_round_seed) if _round_seed else None

if __name__ == "__main__":
    print(session_ttl_hours, session_prune_interval_minutes, log_level, round_seed)
