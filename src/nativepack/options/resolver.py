#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Turn a raw BuildRequest into a validated ResolvedConfig."""

from __future__ import annotations

from pathlib import Path
import re
from typing import Any
from urllib.parse import urlparse

from provide.foundation import logger

from nativepack.config.defaults import (
    APP_TEMPLATE_DIR,
    ARCH_ALIASES,
    DEFAULT_APP_NAME,
    PLATFORM_ALIASES,
    SUPPORTED_ARCHES,
    SUPPORTED_PLATFORMS,
    TRAY_MODES,
)
from nativepack.exceptions import ValidationError
from nativepack.options.model import BuildRequest, EngineConfig, FeatureConfig, ResolvedConfig
from nativepack.utils.platform import host_arch, host_platform

_INVALID_NAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def normalize_url(url: str | None) -> str:
    """Validate a target URL, adding ``https://`` when no scheme was given."""
    if not url or not url.strip():
        raise ValidationError(
            "A target URL is required",
            hint="Pass the address of the site to wrap, e.g. https://example.com",
        )
    candidate = url.strip()
    if "://" not in candidate:
        candidate = f"https://{candidate}"

    parsed = urlparse(candidate)
    if parsed.scheme not in ("http", "https"):
        raise ValidationError(f"Unsupported URL scheme '{parsed.scheme}' in {url}")
    if not parsed.hostname:
        raise ValidationError(f"Your URL '{url}' is invalid: it has no host")
    return candidate


def infer_name(target_url: str) -> str:
    """Derive an app name from the URL host: ``www.github.com`` -> ``Github``."""
    hostname = urlparse(target_url).hostname or ""
    if hostname.startswith("www."):
        hostname = hostname[4:]
    first_label = hostname.split(".")[0]
    return first_label.capitalize() if first_label else DEFAULT_APP_NAME


def sanitize_name(name: str, log: Any = logger) -> str:
    """Strip characters that cannot appear in file names on any target OS."""
    cleaned = _INVALID_NAME_CHARS.sub("", name).strip().rstrip(".")
    if not cleaned:
        log.warning("App name is empty after sanitizing, using default", name=name)
        return DEFAULT_APP_NAME
    return cleaned


def normalize_platform(platform: str | None) -> str:
    if not platform:
        return host_platform()
    value = PLATFORM_ALIASES.get(platform.lower(), platform.lower())
    if value not in SUPPORTED_PLATFORMS:
        raise ValidationError(
            f"Unknown platform '{platform}'",
            hint=f"Use one of: {', '.join(sorted(SUPPORTED_PLATFORMS))}",
        )
    return value


def normalize_arch(arch: str | None) -> str:
    value = (arch or host_arch()).lower()
    value = ARCH_ALIASES.get(value, value)
    if value not in SUPPORTED_ARCHES:
        raise ValidationError(
            f"Unknown architecture '{arch or value}'",
            hint=f"Use one of: {', '.join(sorted(SUPPORTED_ARCHES))}",
        )
    return value


def normalize_tray(tray: str | None) -> str:
    value = (tray or "false").lower()
    if value not in TRAY_MODES:
        raise ValidationError(
            f"Invalid tray mode '{tray}'",
            hint=f"Use one of: {', '.join(sorted(TRAY_MODES))}",
        )
    return value


def _positive(label: str, value: int | None) -> int | None:
    if value is not None and value <= 0:
        raise ValidationError(f"{label} must be a positive number of pixels, got {value}")
    return value


def resolve_options(
    request: BuildRequest, template_dir: Path = APP_TEMPLATE_DIR, log: Any = logger
) -> ResolvedConfig:
    """Validate and normalize a build request.

    Args:
        request: Raw build parameters. Not modified.
        template_dir: Directory holding the app template to stage.
        log: Logger for progress messages.

    Returns:
        A new ResolvedConfig whose ``engine.dir`` still points at the template.

    Raises:
        ValidationError: If any option is missing or invalid.
    """
    target_url = normalize_url(request.target_url)
    name = sanitize_name(request.name, log) if request.name else infer_name(target_url)
    platform = normalize_platform(request.platform)
    arch = normalize_arch(request.arch)
    tray = normalize_tray(request.tray)

    if not request.out:
        raise ValidationError("An output directory is required")

    for inject_file in request.inject:
        path = Path(inject_file)
        if path.suffix not in (".css", ".js"):
            raise ValidationError(
                f"Cannot inject '{inject_file}'",
                hint="Only .css and .js files can be injected",
            )
        if not path.is_file():
            raise ValidationError(f"Inject file not found: {inject_file}")

    if request.icon and not Path(request.icon).is_file():
        raise ValidationError(f"Icon file not found: {request.icon}")

    upgrade_from = request.upgrade_from
    engine = EngineConfig(
        dir=template_dir,
        out=Path(request.out).expanduser().absolute(),
        name=name,
        platform=platform,
        arch=arch,
        overwrite=request.overwrite,
        quiet=not request.verbose,
        icon=str(Path(request.icon).absolute()) if request.icon else None,
        app_copyright=request.app_copyright,
        app_version=request.app_version,
        build_version=request.build_version,
        version_string=dict(request.version_string) if request.version_string else None,
        win32metadata=dict(request.win32metadata) if request.win32metadata else None,
        electron_version=request.electron_version,
        target_url=target_url,
        upgrade=bool(request.upgrade) and bool(upgrade_from),
        upgrade_from=upgrade_from,
    )
    features = FeatureConfig(
        name=name,
        target_url=target_url,
        platform=platform,
        arch=arch,
        tray=tray,
        width=_positive("Width", request.width),
        height=_positive("Height", request.height),
        user_agent=request.user_agent,
        single_instance=bool(request.single_instance),
        inject=tuple(str(Path(p).absolute()) for p in request.inject),
        app_version=request.app_version,
        build_version=request.build_version,
        app_copyright=request.app_copyright,
        electron_version=request.electron_version,
        version_string=engine.version_string,
        win32metadata=engine.win32metadata,
    )
    log.debug("Resolved build options", name=name, platform=platform, arch=arch, target_url=target_url)
    return ResolvedConfig(engine=engine, features=features)


# 🌐📦🔚
