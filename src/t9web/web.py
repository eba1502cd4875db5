from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from t9engine import config as CFG
from t9engine.codec import is_valid_digit_sequence
from t9engine.engine import Engine
from t9engine.loader import SourceUnavailable

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    seq = request.args.get("seq", "", type=str).strip()
    if not is_valid_digit_sequence(seq):
        return jsonify({"error": f"Invalid input sequence: {seq}"}), 400
    if _engine is None or _engine.index is None:
        return jsonify({"error": "dictionary not loaded"}), 503
    return jsonify(_engine.suggest(seq).to_dict())


@app.get("/health")
def health():
    ready = _engine is not None and _engine.index is not None
    words = len(_engine.index) if ready else 0  # type: ignore
    return jsonify({"ok": ready, "words": words})

# ---------- UI ----------
@app.get("/")
def home():
    # Keypad input + two result lists, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>T9 Suggest</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
       background:#0b1117; color:var(--ink); font-size:18px; letter-spacing:2px; outline:none; }
input:focus{ border-color:var(--accent) }
.cols{ display:grid; grid-template-columns:1fr 1fr; gap:16px; margin-top:16px; }
h2{ font-size:14px; color:var(--muted); margin:0 0 6px 0; font-weight:600; }
ul{ list-style:none; margin:0; padding:0; }
li{ padding:4px 0; border-top:1px solid var(--border); }
.count{ color:var(--muted); float:right; font-variant-numeric:tabular-nums; }
.err{ color:#ffb0b0; margin-top:8px; min-height:1.2em; }
</style>
</head>
<body>
<div class="container"><div class="card">
  <h1>T9 Suggest</h1>
  <input id="seq" inputmode="numeric" autocomplete="off" placeholder="Digits 2-9, e.g. 2287" />
  <div class="err" id="err"></div>
  <div class="cols">
    <div><h2>Exact matches</h2><ul id="exact"></ul></div>
    <div><h2>Prefix matches</h2><ul id="prefix"></ul></div>
  </div>
</div></div>
<script>
const seq = document.getElementById("seq");
const err = document.getElementById("err");
const exact = document.getElementById("exact");
const prefix = document.getElementById("prefix");
const NONE = "<li>[None was found]</li>";
let t = null;

function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;","\"":"&quot;"}[c])); }

async function search(){
  err.textContent = "";
  const q = seq.value.trim();
  if(!q){ exact.innerHTML = ""; prefix.innerHTML = ""; return; }
  const res = await fetch(`/api/suggest?seq=${encodeURIComponent(q)}`);
  const data = await res.json();
  if(!res.ok){ err.textContent = data.error ?? res.statusText; return; }
  exact.innerHTML = data.exact.length
    ? data.exact.map(r => `<li>${esc(r.word)}<span class="count">${r.count}</span></li>`).join("")
    : NONE;
  prefix.innerHTML = data.completions.length
    ? data.completions.map(w => `<li>${esc(w)}</li>`).join("")
    : NONE;
}

seq.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("corpus", nargs="+", help="Corpus file(s) or folder(s) of .txt files")
    ap.add_argument("--host", default=CFG.WEB_HOST)
    ap.add_argument("--port", type=int, default=CFG.WEB_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        _engine.build(args.corpus, verbose=args.verbose)
    except SourceUnavailable as e:
        print(e)
        return 2

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
