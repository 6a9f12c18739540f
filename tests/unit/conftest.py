import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work usable as ``async with uow:``"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_password_hasher():
    """Deterministic hasher: digest is "hashed::" + plaintext"""
    hasher = MagicMock()
    hasher.hash = MagicMock(side_effect=lambda plain: f"hashed::{plain}")
    hasher.verify = MagicMock(side_effect=lambda plain, digest: digest == f"hashed::{plain}")
    return hasher
