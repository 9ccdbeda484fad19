"""QA tooling bootstrap for Laravel + Vue + Inertia projects.

Installs linters, formatters, static analyzers and test runners through
Composer and npm/pnpm, merges the matching scripts into composer.json and
package.json, and writes starter config files. It is non-destructive: config
files that already exist are never overwritten.
"""
