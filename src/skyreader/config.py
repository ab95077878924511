# src/skyreader/config.py

DEFAULT_SOURCE_NAME = "skylab.txt"

# Appended to the source name, e.g. skylab.txt -> skylab.txt.duplicado
DUPLICATE_SUFFIX = ".duplicado"

TEXT_ENCODING = "utf-8"
