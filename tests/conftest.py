"""Shared fixtures: raw Figma payloads as returned by the REST API."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def variables_payload() -> dict[str, Any]:
    return {
        "status": 200,
        "error": False,
        "meta": {
            "variableCollections": {
                "VariableCollectionId:1": {
                    "id": "VariableCollectionId:1",
                    "name": "Color",
                    "modes": [
                        {"modeId": "1:0", "name": "Light"},
                        {"modeId": "1:1", "name": "Dark"},
                    ],
                    "defaultModeId": "1:0",
                },
                "VariableCollectionId:2": {
                    "id": "VariableCollectionId:2",
                    "name": "Size",
                    "modes": [{"modeId": "2:0", "name": "Mode 1"}],
                    "defaultModeId": "2:0",
                },
            },
            "variables": {
                "VariableID:1": {
                    "id": "VariableID:1",
                    "name": "color/brand/primary",
                    "variableCollectionId": "VariableCollectionId:1",
                    "resolvedType": "COLOR",
                    "valuesByMode": {
                        "1:0": {"r": 1, "g": 0, "b": 0, "a": 1},
                        "1:1": {"r": 0.2, "g": 0.4, "b": 0.6, "a": 0.8},
                    },
                    "description": "Primary brand color",
                    "scopes": ["ALL_FILLS"],
                    "codeSyntax": {"WEB": "var(--color-brand-primary)"},
                },
                "VariableID:2": {
                    "id": "VariableID:2",
                    "name": "spacing/md",
                    "variableCollectionId": "VariableCollectionId:2",
                    "resolvedType": "FLOAT",
                    "valuesByMode": {"2:0": 16},
                    "description": "",
                    "scopes": ["GAP"],
                },
                "VariableID:3": {
                    "id": "VariableID:3",
                    "name": "color/text/default",
                    "variableCollectionId": "VariableCollectionId:1",
                    "resolvedType": "COLOR",
                    "valuesByMode": {
                        "1:0": {"type": "VARIABLE_ALIAS", "id": "VariableID:1"},
                        "1:1": {"r": 1, "g": 1, "b": 1, "a": 1},
                    },
                },
            },
        },
    }


@pytest.fixture
def styles_payload() -> dict[str, Any]:
    return {
        "status": 200,
        "meta": {
            "styles": [
                {
                    "key": "fill-key",
                    "node_id": "10:1",
                    "style_type": "FILL",
                    "name": "Surface/Card",
                    "description": "Card background",
                },
                {
                    "key": "text-key",
                    "node_id": "10:2",
                    "style_type": "TEXT",
                    "name": "Heading/H1",
                    "description": "",
                },
                {
                    "key": "effect-key",
                    "node_id": "10:3",
                    "style_type": "EFFECT",
                    "name": "Elevation/Raised",
                    "description": "",
                },
            ]
        },
    }


@pytest.fixture
def nodes_payload() -> dict[str, Any]:
    return {
        "nodes": {
            "10:1": {
                "document": {
                    "id": "10:1",
                    "fills": [
                        {"type": "SOLID", "visible": False, "color": {"r": 0, "g": 0, "b": 0, "a": 1}},
                        {"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}},
                    ],
                }
            },
            "10:2": {
                "document": {
                    "id": "10:2",
                    "style": {
                        "fontFamily": "Inter",
                        "fontWeight": 700,
                        "fontSize": 32,
                        "letterSpacing": -0.5,
                        "lineHeightPx": 40,
                        "lineHeightUnit": "PIXELS",
                        "textAlignHorizontal": "LEFT",
                        "textCase": "SMALL_CAPS",
                        "textDecoration": "UNDERLINE",
                    },
                }
            },
            "10:3": {
                "document": {
                    "id": "10:3",
                    "effects": [
                        {
                            "type": "DROP_SHADOW",
                            "visible": True,
                            "color": {"r": 0, "g": 0, "b": 0, "a": 0.25},
                            "offset": {"x": 0, "y": 4},
                            "radius": 8,
                            "spread": 0,
                        },
                        {"type": "LAYER_BLUR", "visible": True, "radius": 4},
                    ],
                }
            },
        }
    }
