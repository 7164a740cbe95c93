#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

from mdrest.config.loader import ConfigLoader
from mdrest.config.validation import ConfigValidator
from mdrest.errors import ConfigError


def main():
    """Validate config/mdrest.yaml (or the directory given as argument)."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating mdrest configuration in {loader.config_dir}...")

    try:
        config = loader.merge_config()
    except ConfigError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print(f"✅ base_url: {config['base_url']}")
    for name, template in sorted(config["paths"].items()):
        print(f"  • {name}: {template}")
    print("\n🎉 Configuration validation passed!")


if __name__ == "__main__":
    main()
