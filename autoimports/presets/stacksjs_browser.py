"""Stacks browser utilities. App models live on window.StacksBrowser and are not listed."""

from __future__ import annotations

from autoimports.config import InlinePreset

STACKSJS_BROWSER = InlinePreset(
    source="@stacksjs/browser",
    imports=[
        # Query builder
        "browserQuery",
        "BrowserQueryBuilder",
        "BrowserQueryError",
        "browserAuth",
        "configureBrowser",
        "getBrowserConfig",
        "createBrowserDb",
        "createBrowserModel",
        "isBrowser",

        # Auth
        "auth",
        "useAuth",

        # Only needed for custom API config
        "initApi",

        # Formatting
        "formatAreaSize",
        "formatDistance",
        "formatElevation",
        "formatDuration",
        "getRelativeTime",
        "fetchData",
    ],
)
