#!/usr/bin/env python

import os
from pathlib import Path

from ciuspt2ddl.cli import app

CIUSPT2DDL_APP_HOME = Path(__file__).parent.parent.resolve().absolute()

os.environ.setdefault("CIUSPT2DDL_CONFIG_FILE", str(CIUSPT2DDL_APP_HOME / "conf/config.toml"))
os.environ.setdefault("CIUSPT2DDL_LOGGING_CONFIG_FILE", str(CIUSPT2DDL_APP_HOME / "conf/logging_py.json"))

if __name__ == "__main__":
    app()
