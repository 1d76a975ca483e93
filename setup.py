"""
Build script for bbhtml with optional mypyc compilation.

    BBHTML_USE_MYPYC=1 pip install .
"""

import os

from setuptools import setup

# Per-character hot path
MYPYC_MODULES = [
    "src/bbhtml/tokenizer.py",
    "src/bbhtml/buffer.py",
    "src/bbhtml/tokens.py",
]

ext_modules = []
if os.environ.get("BBHTML_USE_MYPYC", "0") == "1":
    from mypyc.build import mypycify

    ext_modules = mypycify(MYPYC_MODULES, opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"))

setup(ext_modules=ext_modules)
