"""
Server-rendered dashboard page.

The page polls `/api/all` and paints the server-formatted strings as
terminal-style rows; it does no price formatting of its own.
"""

import html

import orjson

from spreadwatch.config.constants import EXCHANGES, HOME_EXCHANGE, SYMBOL_PATTERN


def _script_json(value: object) -> str:
    """Serialize for embedding inside a <script> block."""
    return orjson.dumps(value).decode().replace("<", "\\u003c")


def render_dashboard(symbol: str, token: str, poll_interval_ms: int) -> str:
    """
    Render the dashboard HTML.

    Args:
        symbol: Pre-filled symbol.
        token: Shared secret, echoed back on API calls.
        poll_interval_ms: Client polling interval.
    """
    config = {
        "symbol": symbol,
        "token": token,
        "pollIntervalMs": poll_interval_ms,
        "exchanges": list(EXCHANGES),
        "home": HOME_EXCHANGE,
        "symbolPattern": SYMBOL_PATTERN,
    }
    return (
        DASHBOARD_HTML.replace("__SYMBOL__", html.escape(symbol, quote=True))
        .replace("__CONFIG__", _script_json(config))
    )


ACCESS_DENIED_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"><title>Access Denied</title></head>
<body style="background:#000;color:#fff;font-family:monospace;padding:20px;">
    <h1>Access Denied</h1>
    <p>A valid token is required. Use: /?token=YOUR_TOKEN&amp;symbol=BTC</p>
</body>
</html>"""


DASHBOARD_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Spread Monitor</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { background: #000; color: #fff; font-family: monospace; font-size: 28px; overflow: hidden; }

        #container { position: fixed; top: 0; left: 0; white-space: pre; line-height: 1.1; }
        .control-row { display: flex; align-items: center; gap: 5px; margin-top: 2px; }

        #symbolInput { font-family: monospace; font-size: 28px; width: 140px; background: #000; color: #fff; border: 1px solid #444; padding: 1px 3px; }
        #startBtn { font-family: monospace; font-size: 28px; background: #000; color: #fff; border: 1px solid #444; padding: 1px 10px; cursor: pointer; }
        #startBtn:hover { background: #222; }
        #startBtn:active { background: #444; }

        #status, #sys, #debug { margin-top: 2px; }
        #sys, #debug { font-size: 16px; color: #888; }
        .err { color: #ff4444; }
        .best { color: #ffff00; }
        .closed { color: #ff4444; }
        .open { color: #00ff66; }
        .tag { font-size: 14px; color: #0af; margin-left: 5px; opacity: 0.7; }

        @keyframes blink { 0%, 100% { opacity: 1; } 50% { opacity: 0; } }
        .blink-dot { animation: blink 1s infinite; display: inline-block; }
    </style>
</head>
<body>
    <div id="container">
        <div id="output">Loading...</div>
        <div class="control-row">
            <input id="symbolInput" placeholder="BTC" value="__SYMBOL__" autocomplete="off"/>
            <button id="startBtn">START</button>
        </div>
        <div id="status">Waiting...</div>
        <div id="sys"></div>
        <div id="debug"></div>
    </div>

    <script>
        const CONFIG = __CONFIG__;
        let symbol = CONFIG.symbol;
        let timer = null, blink = false, dex = null;

        const output = document.getElementById("output");
        const input = document.getElementById("symbolInput");
        const statusEl = document.getElementById("status");
        const sysEl = document.getElementById("sys");
        const debugEl = document.getElementById("debug");
        const startBtn = document.getElementById("startBtn");

        function api(path, params) {
            const qs = new URLSearchParams({...params, token: CONFIG.token});
            return fetch(`${path}?${qs}`, {cache: "no-store"});
        }

        const SYMBOL_RE = new RegExp(`^${CONFIG.symbolPattern}$`);

        function esc(text) {
            const span = document.createElement("span");
            span.textContent = String(text);
            return span.innerHTML;
        }

        function pad(name) { return name.padEnd(8, " "); }

        function denied() {
            output.textContent = "Access denied. Check the token.";
            statusEl.textContent = "Authorization error";
            statusEl.className = "err";
            stop();
        }

        async function resolveToken() {
            dex = null;
            debugEl.textContent = "";
            try {
                const res = await api("/api/resolve", {symbol});
                if (res.status === 403) return denied();
                const data = await res.json();
                if (data.ok) {
                    dex = {chain: data.chain, addr: data.addr, formatted: null};
                    debugEl.textContent = `DEX ${data.chain} ${data.addr}`;
                } else {
                    debugEl.textContent = `resolve: ${data.error}`;
                }
            } catch (e) {
                debugEl.textContent = `resolve: ${e}`;
            }
        }

        async function updateDex() {
            if (!dex) return;
            try {
                const res = await api("/api/dex", {chain: dex.chain, addr: dex.addr});
                const data = await res.json();
                dex.formatted = data.ok ? data.priceFormatted : null;
            } catch (e) {
                dex.formatted = null;
            }
        }

        async function update() {
            if (!symbol) return;
            blink = !blink;

            try {
                const [res] = await Promise.all([api("/api/all", {symbol}), updateDex()]);
                if (res.status === 403) return denied();

                const data = await res.json();
                if (!data.ok) {
                    statusEl.textContent = "Data error";
                    statusEl.className = "err";
                    return;
                }

                const dot = blink ? '<span class="blink-dot">●</span>' : "○";
                const deposit = data.depositOpen
                    ? '<span class="open">DEP</span>'
                    : '<span class="closed">DEP</span>';
                const lines = [`${dot} ${esc(symbol)} ${CONFIG.home}:${esc(data.mexcFormatted)}<span class="tag">[FUT]</span> ${deposit}`];

                CONFIG.exchanges.forEach(ex => {
                    if (!(data.prices[ex] > 0)) return;
                    const sp = data.spreads[ex];
                    const spread = sp === null ? "---" : `${sp > 0 ? "+" : ""}${sp.toFixed(2)}%`;
                    const mark = ex === data.best ? '<span class="best">◆</span>' : "◇";
                    lines.push(`${mark} ${pad(ex)}:${esc(data.pricesFormatted[ex])} (${spread})`);
                });

                if (dex && dex.formatted) {
                    lines.push(`◇ ${pad("DEX")}:${esc(dex.formatted)}<span class="tag">[${esc(dex.chain)}]</span>`);
                }

                output.innerHTML = lines.join("<br>");
                sysEl.textContent = `${data.sys.ip}  cpu ${data.sys.cpu}%  ram ${data.sys.ram}%`;

                const time = new Date().toLocaleTimeString([], {hour: "2-digit", minute: "2-digit", second: "2-digit", hour12: false});
                statusEl.textContent = `✓ ${time}`;
                statusEl.className = "";
            } catch (e) {
                statusEl.textContent = "Network error";
                statusEl.className = "err";
            }
        }

        function stop() {
            if (timer) clearInterval(timer);
            timer = null;
        }

        function start() {
            stop();
            update();
            timer = setInterval(update, CONFIG.pollIntervalMs);
        }

        startBtn.onclick = () => {
            const next = input.value.trim().toUpperCase();
            if (!SYMBOL_RE.test(next)) {
                statusEl.textContent = "Invalid symbol";
                statusEl.className = "err";
                return;
            }
            symbol = next;

            const url = new URL(window.location);
            url.searchParams.set("symbol", symbol);
            window.history.replaceState({}, "", url);

            resolveToken();
            start();
        };

        input.addEventListener("keypress", e => { if (e.key === "Enter") startBtn.click(); });
        document.addEventListener("click", () => input.focus());

        document.addEventListener("visibilitychange", () => {
            if (document.hidden) {
                stop();
                statusEl.textContent = "⏸ Paused";
            } else {
                start();
            }
        });

        input.focus();
        input.select();
        resolveToken();
        start();
    </script>
</body>
</html>"""
