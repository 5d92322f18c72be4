import os


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Keys and queries must be sorted and duplicate-free. Checking this costs a pass over
# every key, so it is off unless explicitly requested.
VALIDATE_KEYS = _env_flag('SETMAP_VALIDATE_KEYS')
