"""Centralized configuration for the CLAIMSO services backend.

Re-exports everything from claimso.infrastructure.settings so callers have a
single import point, then adds typed constants for the email pipeline, LLM,
document rendering and API settings. Environment variable overrides use safe
defaults so the app starts without extra env configuration.
"""

from __future__ import annotations

import os

from claimso.infrastructure.settings import *  # noqa: F401, F403 re-export existing

# --- App ---
APP_VERSION: str = "1.0.0"
SERVICE_NAME: str = "claimso-services"
ORGANIZATION_NAME: str = "CLAIMSO"

# --- Email Pipeline ---
PIPELINE_BODY_TRUNCATION: int = 8000
PIPELINE_SUBJECT_TRUNCATION: int = 500
DEGRADED_NOTES_BODY_CHARS: int = 500

# --- LLM ---
LLM_TIMEOUT_SECONDS: int = int(os.getenv("CLAIMSO_LLM_TIMEOUT", "30"))
LLM_MAX_WORKERS: int = int(os.getenv("CLAIMSO_LLM_MAX_WORKERS", "4"))
LLM_TEMPERATURE: float = 0.1
CLASSIFIER_MAX_TOKENS: int = 50
RECEIPT_MAX_TOKENS: int = 500
STATUS_MAX_TOKENS: int = 300

# --- Claim Packet ---
SANITIZER_MAX_LENGTH: int = 1000

# --- Wallet Pass ---
PASS_RELEVANT_AFTER_DAYS: int = 365
PASS_EXPIRES_AFTER_DAYS: int = 730

# --- Calendar ---
CALENDAR_PRODUCT_ID: str = "-//CLAIMSO//Warranty Reminders//EN"
CALENDAR_UID_DOMAIN: str = "claimso.com"
