"""Sample package.json payloads used across the library discovery tests."""

from __future__ import annotations

NO_LIBRARIES_CONFIG_FILE = {
    "name": "my-app",
    "codegenConfig": {
        "name": "AppModules",
        "type": "all",
        "jsSrcsDir": ".",
    },
}

SINGLE_LIBRARY_CODEGEN_CONFIG = {
    "codegenConfig": {
        "libraries": [
            {
                "name": "FBReactNativeSpec",
                "type": "modules",
                "jsSrcsDir": "Libraries",
            },
        ],
    },
}

MULTIPLE_LIBRARIES_CODEGEN_CONFIG = {
    "codegenConfig": {
        "libraries": [
            {
                "name": "my-component",
                "type": "components",
                "jsSrcsDir": "component/js",
            },
            {
                "name": "my-module",
                "type": "module",
                "jsSrcsDir": "module/js",
            },
        ],
    },
}
