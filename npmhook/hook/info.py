"""Static self-description advertised to the release host."""

from __future__ import annotations

import json
from dataclasses import dataclass

from npmhook import __version__
from npmhook.hook.config import DEFAULT_TAG
from npmhook.hook.contracts import Hook
from npmhook.hook.validators import MAX_TAG_LENGTH


@dataclass(frozen=True, slots=True)
class PluginInfo:
    name: str
    version: str
    description: str
    author: str
    hooks: tuple[Hook, ...]
    config_schema: str

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "author": self.author,
            "hooks": [str(h) for h in self.hooks],
            "config_schema": json.loads(self.config_schema),
        }


CONFIG_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "registry": {
            "type": "string",
            "description": "npm registry URL (https, or http for localhost)",
            "format": "uri",
        },
        "tag": {
            "type": "string",
            "description": "dist-tag to publish under",
            "default": DEFAULT_TAG,
            "maxLength": MAX_TAG_LENGTH,
            "pattern": "^[A-Za-z0-9_][A-Za-z0-9._-]*$",
        },
        "access": {
            "type": "string",
            "description": "Package access level",
            "enum": ["public", "restricted"],
        },
        "otp": {
            "type": "string",
            "description": "One-time password for 2FA (can also use NPM_OTP env)",
            "pattern": "^[0-9]{6,8}$",
        },
        "dry_run": {
            "type": "boolean",
            "description": "Show what would be published without publishing",
            "default": False,
        },
        "package_dir": {
            "type": "string",
            "description": "Directory containing package.json, relative to the working directory",
        },
        "update_version": {
            "type": "boolean",
            "description": "Update the version in package.json before publishing",
            "default": True,
        },
    },
}


def plugin_info() -> PluginInfo:
    return PluginInfo(
        name="npm",
        version=__version__,
        description="Publish packages to npm registry",
        author="Relicta Team",
        hooks=(Hook.BEFORE_PUBLISH, Hook.AFTER_PUBLISH),
        config_schema=json.dumps(CONFIG_SCHEMA, indent=2),
    )
