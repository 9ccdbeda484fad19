"""Starter config files written into the project root.

Contents are fixed and treated as opaque by the orchestrator: each file is
written verbatim, and only when its destination does not exist yet.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class StubFile:
    path: str
    render: Callable[[], str]
    # Other files that make this stub redundant when present.
    satisfied_by: tuple[str, ...] = ()

    def payload(self) -> bytes:
        return self.render().encode("utf-8")


def render_eslintrc() -> str:
    return (
        "/* eslint-env node */\n"
        "module.exports = {\n"
        "    root: true,\n"
        "    env: {\n"
        "        browser: true,\n"
        "        es2022: true,\n"
        "        node: true,\n"
        "    },\n"
        "    extends: [\n"
        "        'eslint:recommended',\n"
        "        'plugin:vue/vue3-recommended',\n"
        "    ],\n"
        "    parserOptions: {\n"
        "        ecmaVersion: 'latest',\n"
        "        sourceType: 'module',\n"
        "    },\n"
        "    ignorePatterns: ['public/build/', 'vendor/', 'node_modules/'],\n"
        "    rules: {\n"
        "        'vue/multi-word-component-names': 'off',\n"
        "        'vue/require-default-prop': 'off',\n"
        "    },\n"
        "};\n"
    )


def render_prettierrc() -> str:
    return (
        "{\n"
        '    "semi": true,\n'
        '    "singleQuote": true,\n'
        '    "tabWidth": 4,\n'
        '    "printWidth": 100,\n'
        '    "trailingComma": "all",\n'
        '    "vueIndentScriptAndStyle": true\n'
        "}\n"
    )


def render_vite_config() -> str:
    return (
        "import { defineConfig } from 'vite';\n"
        "import laravel from 'laravel-vite-plugin';\n"
        "import vue from '@vitejs/plugin-vue';\n"
        "\n"
        "export default defineConfig({\n"
        "    plugins: [\n"
        "        laravel({\n"
        "            input: 'resources/js/app.js',\n"
        "            refresh: true,\n"
        "        }),\n"
        "        vue({\n"
        "            template: {\n"
        "                transformAssetUrls: {\n"
        "                    base: null,\n"
        "                    includeAbsolute: false,\n"
        "                },\n"
        "            },\n"
        "        }),\n"
        "    ],\n"
        "});\n"
    )


def render_vitest_config() -> str:
    return (
        "import { defineConfig } from 'vitest/config';\n"
        "import vue from '@vitejs/plugin-vue';\n"
        "\n"
        "export default defineConfig({\n"
        "    plugins: [vue()],\n"
        "    test: {\n"
        "        environment: 'jsdom',\n"
        "        globals: true,\n"
        "        include: ['resources/js/**/*.{test,spec}.{js,ts}'],\n"
        "    },\n"
        "});\n"
    )


def render_phpstan_neon() -> str:
    return (
        "includes:\n"
        "    - vendor/nunomaduro/larastan/extension.neon\n"
        "\n"
        "parameters:\n"
        "    paths:\n"
        "        - app/\n"
        "\n"
        "    # Level 9 is the highest level\n"
        "    level: 5\n"
        "\n"
        "    checkMissingIterableValueType: false\n"
    )


def render_phpunit_xml() -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<phpunit xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"\n'
        '         xsi:noNamespaceSchemaLocation="vendor/phpunit/phpunit/phpunit.xsd"\n'
        '         bootstrap="vendor/autoload.php"\n'
        '         colors="true"\n'
        ">\n"
        "    <testsuites>\n"
        '        <testsuite name="Unit">\n'
        "            <directory>tests/Unit</directory>\n"
        "        </testsuite>\n"
        '        <testsuite name="Feature">\n'
        "            <directory>tests/Feature</directory>\n"
        "        </testsuite>\n"
        "    </testsuites>\n"
        "    <source>\n"
        "        <include>\n"
        "            <directory>app</directory>\n"
        "        </include>\n"
        "    </source>\n"
        "    <php>\n"
        '        <env name="APP_ENV" value="testing"/>\n'
        '        <env name="BCRYPT_ROUNDS" value="4"/>\n'
        '        <env name="CACHE_DRIVER" value="array"/>\n'
        '        <env name="DB_CONNECTION" value="sqlite"/>\n'
        '        <env name="DB_DATABASE" value=":memory:"/>\n'
        '        <env name="MAIL_MAILER" value="array"/>\n'
        '        <env name="QUEUE_CONNECTION" value="sync"/>\n'
        '        <env name="SESSION_DRIVER" value="array"/>\n'
        "    </php>\n"
        "</phpunit>\n"
    )


# tsconfig.json is not a stub: it is generated by `tsc --init` when missing.
ESLINTRC = StubFile(".eslintrc.cjs", render_eslintrc)
PRETTIERRC = StubFile(".prettierrc", render_prettierrc)
VITE_CONFIG = StubFile("vite.config.ts", render_vite_config)
VITEST_CONFIG = StubFile("vitest.config.ts", render_vitest_config)
PHPSTAN_NEON = StubFile("phpstan.neon", render_phpstan_neon)
PHPUNIT_XML = StubFile(
    "phpunit.xml", render_phpunit_xml, satisfied_by=("phpunit.xml.dist",)
)

STUB_FILES: tuple[StubFile, ...] = (
    ESLINTRC,
    PRETTIERRC,
    VITE_CONFIG,
    VITEST_CONFIG,
    PHPSTAN_NEON,
    PHPUNIT_XML,
)
