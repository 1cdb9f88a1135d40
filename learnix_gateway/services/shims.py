"""Environment shims for JavaScript/TypeScript submissions.

Sources are rewritten by plain string concatenation: shim blocks are
prepended, the user's code is never parsed or modified. Two passes exist:

1. Stdin/print helpers (HackerRank-style ``input()`` and ``print()``;
   ``println()`` in TypeScript, where ``print`` clashes with ``window.print``).
2. A sandboxed module loader that swaps ``express`` for an in-memory fake,
   since the Runner cannot open listening sockets. Route registrations are
   recorded in a global store that instructor tests inspect via
   ``LearnixTest``.

Resulting order: module shim, stdin shim, original source. The module shim
redefines ``require``, so it has to run before anything else.

Detection is a regex heuristic. A ``require('express')`` inside a comment or
string literal also triggers the module shim.
"""

import json
import re

from ..config.languages import is_shimmed_language

ENVIRONMENT_SHIMS_MARKER = "// Environment Shims"

# require('express') / require( "express" ), but not require('express-session')
EXPRESS_REQUIRE_PATTERN = re.compile(r"""require\s*\(\s*['"]express['"]\s*\)""")

# Replaced with ": any" in the TypeScript rendition of the module shim
_TS_ANY = "/*: any*/"

JS_STDIN_HELPERS = r"""
const __inputLines = __stdin.split('\n');
let __inputIndex = 0;

function input() {
    if (__inputIndex >= __inputLines.length) {
        return '';
    }
    return __inputLines[__inputIndex++];
}

function print(...args) {
    console.log(...args);
}
// --------------------------------
"""

TS_STDIN_HELPERS = r"""
const __inputLines: string[] = __stdin.split('\n');
let __inputIndex: number = 0;

const input = (): string => {
    if (__inputIndex >= __inputLines.length) {
        return '';
    }
    return __inputLines[__inputIndex++];
};

const println = (...args: any[]): void => {
    console.log(...args);
};
// --------------------------------
"""

TS_AMBIENT_DECLARATIONS = """declare var global: any;
declare var module: any;
declare var LearnixTest: any;
"""

EXPRESS_MOCK = r"""
// --- LEARNIX MOCK ENVIRONMENT ---
// Simulated Express.js: routes are recorded, no network port is opened.

global.__LEARNIX_MOCK__ = {
    routes: [],
    listening: false,
    port: null
};

global.LearnixTest = {
    expectRoute: (method/*: any*/, path/*: any*/) => {
        const expected = String(method).toUpperCase();
        const found = global.__LEARNIX_MOCK__.routes.some((r/*: any*/) =>
            r.method === expected && r.path === path
        );
        if (!found) {
            throw new Error(`Test Failed: Expected route "${expected} ${path}" to be defined, but it was not found.`);
        }
    },
    expectListening: (port/*: any*/) => {
        if (!global.__LEARNIX_MOCK__.listening) {
            throw new Error("Test Failed: Expected server to be listening (app.listen), but it wasn't called.");
        }
        if (port && global.__LEARNIX_MOCK__.port !== port) {
            throw new Error(`Test Failed: Expected server to listen on port ${port}, but it is listening on ${global.__LEARNIX_MOCK__.port}.`);
        }
    }
};

var require = (moduleName/*: any*/)/*: any*/ => {
    if (moduleName === 'express') {
        const record = (method/*: any*/, path/*: any*/) => {
            console.log(`[MOCK] Registered ${method} ${path}`);
            global.__LEARNIX_MOCK__.routes.push({ method, path });
        };
        const app/*: any*/ = () => ({
            listen: (port/*: any*/, cb/*: any*/) => {
                console.log(`\x1b[32m[MOCK SERVER] Server running at http://localhost:${port}\x1b[0m`);
                console.log('\x1b[33m[NOTE] This is a simulation. No real network port is opened.\x1b[0m');
                global.__LEARNIX_MOCK__.listening = true;
                global.__LEARNIX_MOCK__.port = port;
                if (cb) cb();
                return { close: () => {} };
            },
            get: (path/*: any*/, ...handlers/*: any*/) => record('GET', path),
            post: (path/*: any*/, ...handlers/*: any*/) => record('POST', path),
            put: (path/*: any*/, ...handlers/*: any*/) => record('PUT', path),
            delete: (path/*: any*/, ...handlers/*: any*/) => record('DELETE', path),
            all: (path/*: any*/, ...handlers/*: any*/) => record('ALL', path),
            use: (arg/*: any*/, ...handlers/*: any*/) => record('USE', typeof arg === 'string' ? arg : '/'),
        });
        app.static = () => {};
        app.json = () => {};
        app.urlencoded = () => {};
        app.Router = () => app();
        return app;
    }
    try {
        return module.require(moduleName);
    } catch (e) {
        console.warn(`[WARNING] Module '${moduleName}' not installed in this playground.`);
        return {};
    }
};
// --------------------------------
"""


def uses_express(source_code: str) -> bool:
    """Check whether the source loads the sandboxed ``express`` module."""
    return EXPRESS_REQUIRE_PATTERN.search(source_code) is not None


def build_stdin_shim(language: str, stdin: str | None = None) -> str:
    """Render the stdin/print helper block for JS or TS.

    The raw stdin is embedded as a JSON string literal, so newlines and
    quotes survive. ``input()`` reads from that copy only and never touches
    the process's real standard input.
    """
    is_typescript = language.lower() == "typescript"
    helper_name = "println" if is_typescript else "print"
    annotation = ": string" if is_typescript else ""
    header = f"{ENVIRONMENT_SHIMS_MARKER}: HackerRank-style input() and {helper_name}()\n"
    stdin_literal = f"const __stdin{annotation} = {json.dumps(stdin or '')};\n"
    helpers = TS_STDIN_HELPERS if is_typescript else JS_STDIN_HELPERS
    return header + stdin_literal + helpers


def build_module_shim(language: str) -> str:
    """Render the mock Express loader for JS or TS."""
    if language.lower() == "typescript":
        return TS_AMBIENT_DECLARATIONS + EXPRESS_MOCK.replace(_TS_ANY, ": any")
    return EXPRESS_MOCK


def prepare_source(
    language: str,
    source_code: str,
    stdin: str | None = None,
    mock_modules: bool = True,
) -> str:
    """Prepend environment shims to a submission.

    Languages other than JavaScript/TypeScript are returned unchanged.
    ``mock_modules=False`` gives the stdin-only variant.
    """
    if not is_shimmed_language(language):
        return source_code

    prepared = build_stdin_shim(language, stdin) + "\n" + source_code

    if mock_modules and uses_express(source_code):
        prepared = build_module_shim(language) + "\n" + prepared

    return prepared
