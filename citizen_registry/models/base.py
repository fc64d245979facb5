# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base model configuration and common field factories.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from bson import ObjectId


def generate_object_id() -> str:
    """Generate a new ObjectId as string."""
    return str(ObjectId())


def utc_now() -> datetime:
    """Current timestamp in UTC."""
    return datetime.now(timezone.utc)


class RegistryModel(BaseModel):
    """Base model shared by registry entities."""
    
    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment so in-place updates keep field types
        validate_assignment=True
    )
