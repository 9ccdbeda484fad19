from __future__ import annotations

from typing import Final

# Frontend integration whose presence pulls in the Vue-specific tooling.
INTEGRATION_PACKAGE: Final = "@inertiajs/inertia"

PNPM_LOCK_FILE: Final = "pnpm-lock.yaml"
COMPOSER_JSON: Final = "composer.json"
PACKAGE_JSON: Final = "package.json"
TSCONFIG_JSON: Final = "tsconfig.json"

SAIL_BINARY: Final = "vendor/bin/sail"
SAIL_PREFIX: Final = "./vendor/bin/sail "
SAIL_INSTALL_HINT: Final = (
    "composer require laravel/sail --dev && php artisan sail:install"
)

BACKEND_DEV_PACKAGES: tuple[str, ...] = (
    "laravel/pint",
    "nunomaduro/larastan",
    "phpunit/phpunit",
    "enlightn/laravel-insights",
)

FRONTEND_BASE_PACKAGES: tuple[str, ...] = (
    "eslint",
    "prettier",
    "typescript",
    "vitest",
    "jsdom",
)

# Only useful when the Inertia/Vue stack is present.
FRONTEND_INTEGRATION_PACKAGES: tuple[str, ...] = (
    "eslint-plugin-vue",
    "vue-tsc",
    "@vue/test-utils",
    "@vitejs/plugin-vue",
)

COMPOSER_SCRIPTS: dict[str, str | list[str]] = {
    "format": "vendor/bin/pint",
    "lint": "@format",
    "analyse": "vendor/bin/phpstan analyse",
    "test": "php artisan test",
    "coverage": "phpunit --coverage-text --colors=always",
    "check-all": [
        "@format",
        "@analyse",
        "@test",
        "npm run check-format",
        "npm run lint",
        "npm run type-check",
        "npm run test",
    ],
}

PACKAGE_JSON_SCRIPTS: dict[str, str | list[str]] = {
    "lint": "eslint resources/js",
    "format": 'prettier --write "resources/js/**/*.{js,ts,vue}"',
    "check-format": 'prettier --check "resources/js/**/*.{js,ts,vue}"',
    "type-check": "vue-tsc --noEmit",
    "test": "vitest run",
    "test:watch": "vitest",
}

TSCONFIG_INIT_COMMAND: Final = (
    "npx tsc --init --rootDir resources/js --outDir resources/js/dist"
    " --allowJs --esModuleInterop --module ESNext --target ESNext"
    " --moduleResolution Node --skipLibCheck"
)


def frontend_dev_packages(*, integration_present: bool) -> list[str]:
    pkgs = list(FRONTEND_BASE_PACKAGES)
    if integration_present:
        pkgs.extend(FRONTEND_INTEGRATION_PACKAGES)
    return pkgs


def backend_install_command() -> str:
    return "composer require --dev " + " ".join(BACKEND_DEV_PACKAGES)


def frontend_install_command(package_manager: str, packages: list[str]) -> str:
    return f"{package_manager} install --save-dev " + " ".join(packages)


def build_command(package_manager: str) -> str:
    return f"{package_manager} run build"
