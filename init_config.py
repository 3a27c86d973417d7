import logging

from jsonconf import ConfigStore, ConfigStoreError, get_default_data
from jsonconf.config.logging_config import setup_logging

logger = logging.getLogger("init_config")


def main() -> int:
    setup_logging()

    # seed from the shared defaults; CONFIG_PATH picks the file
    store = ConfigStore.from_env(defaults=get_default_data(), strict=True)
    try:
        existed = store.ensure_exists()
    except ConfigStoreError as e:
        logger.error("Failed to prepare configuration file: %s", e)
        return 1

    if existed:
        print(f"Configuration file already present: {store.file_path}")
    else:
        print(f"Configuration file created: {store.file_path}")
    print("Keys:", ", ".join(store.keys()) or "(none)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
