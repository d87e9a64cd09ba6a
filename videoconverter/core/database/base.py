# File: videoconverter/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Every feature's SQL models inherit from this.
Base = declarative_base()
