"""Centralized imports for the entire project (app + code_quality_checker)."""

# Standard library
import logging
import re
from datetime import datetime
from typing import Any, List, Optional

# External
from fastapi import HTTPException
from openai import OpenAI
