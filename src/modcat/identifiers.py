# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Identifiers for the test modules shipped with the platform build."""

from __future__ import annotations

from enum import Enum


class ModuleID(str, Enum):
    """Enumerate every loadable test module entry point.

    To add a new module, add a member here and tie it to an entry point in
    :data:`modcat.builders.DEFAULT_CATEGORIES`.
    """

    TEST_CPU_ISOLATOR = "TestCpuIsolator"
    TEST_MEM_ISOLATOR = "TestMemIsolator"
    TEST_CRAM_MD5_AUTHENTICATEE = "TestCRAMMD5Authenticatee"
    TEST_CRAM_MD5_AUTHENTICATOR = "TestCRAMMD5Authenticator"
    TEST_SANDBOX_CONTAINER_LOGGER = "TestSandboxContainerLogger"
    LOGROTATE_CONTAINER_LOGGER = "LogrotateContainerLogger"
    TEST_HOOK = "TestHook"
    TEST_ANONYMOUS = "TestAnonymous"
    TEST_DRF_ALLOCATOR = "TestDRFAllocator"
    TEST_NOOP_RESOURCE_ESTIMATOR = "TestNoopResourceEstimator"
    TEST_LOCAL_AUTHORIZER = "TestLocalAuthorizer"
    TEST_HTTP_BASIC_AUTHENTICATOR = "TestHttpBasicAuthenticator"
    TEST_CURL_FETCHER_PLUGIN = "TestCurlFetcherPlugin"

    @classmethod
    def from_raw(cls, raw: str) -> ModuleID | None:
        """Return the member matching ``raw`` by value or member name.

        Args:
            raw: Identifier token such as ``TestHook`` or ``TEST_HOOK``.

        Returns:
            ModuleID | None: Matching member when recognised; otherwise ``None``.
        """

        try:
            return cls(raw)
        except ValueError:
            return cls.__members__.get(raw.upper())

    def __str__(self) -> str:
        return self.value


__all__ = ["ModuleID"]
