from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from swipe_engine.engine import Engine
from swipe_engine.errors import DictionaryNotFound, LoadError
from swipe_engine.config import TOP_K, BUNDLED_DICTIONARY

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine = Engine()

# ---------- API ----------
@app.get("/api/predict")
def api_predict():
    trace = request.args.get("trace", "", type=str)
    limit = request.args.get("limit", TOP_K, type=int)
    if not trace:
        return jsonify([])
    rows = _engine.predict(trace, limit=limit)
    return jsonify([r.to_dict() for r in rows])

@app.post("/api/load")
def api_load():
    body = request.get_json(silent=True) or {}
    path = body.get("path", "")
    try:
        count = _engine.load(str(path))
    except LoadError as e:
        status = 404 if isinstance(e, DictionaryNotFound) else 422
        return jsonify({"loaded": False, "count": 0, "code": e.code, "error": str(e)}), status
    return jsonify({"loaded": True, "count": count, "code": count})

@app.get("/api/status")
def api_status():
    return jsonify({
        "loaded": _engine.is_loaded,
        "word_count": _engine.word_count,
        "generation": _engine.generation,
        "params": _engine.params.to_dict(),
    })

@app.get("/health")
def health():
    return jsonify({"status": "ok"})

# ---------- UI ----------
@app.get("/")
def home():
    # single page, no external deps: type a trace, see the ranked words
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>SwipeType • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
.row{ display:grid; grid-template-columns:3rem 7rem 7rem 1fr; gap:10px; padding:10px 14px; border-top:1px solid var(--border); }
.head{ color:var(--muted); font-weight:600 }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>SwipeType</h1>
      <input id="trace" type="text" placeholder="Letter trace, e.g. caaat" autocomplete="off" autofocus />
      <div class="meta" id="stats">Ready.</div>
      <div class="row head"><div>#</div><div>Score</div><div>Freq</div><div>Word</div></div>
      <div id="out" class="empty">Start typing to see predictions.</div>
    </div>
  </div>
<script>
const $ = (id) => document.getElementById(id);
let seq = 0;
async function run(){
  const trace = $("trace").value;
  const mine = ++seq;
  if(!trace){ $("out").className = "empty"; $("out").textContent = "Start typing to see predictions."; return; }
  const t0 = performance.now();
  const rv = await fetch(`/api/predict?trace=${encodeURIComponent(trace)}&limit=8`);
  const rows = await rv.json();
  if(mine !== seq) return;
  $("stats").textContent = `${rows.length} result(s) in ${(performance.now() - t0).toFixed(1)} ms`;
  if(!rows.length){ $("out").className = "empty"; $("out").textContent = "(no matches)"; return; }
  $("out").className = "";
  $("out").innerHTML = rows.map((r, i) =>
    `<div class="row"><div>${i + 1}</div><div>${r.score.toFixed(4)}</div><div>${r.frequency}</div><div>${r.word}</div></div>`
  ).join("");
}
$("trace").addEventListener("input", run);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    global _engine
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the swipe Engine")
    ap.add_argument("--dict", dest="dict_path", default=str(BUNDLED_DICTIONARY))
    ap.add_argument("--alpha", type=float, default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    _engine = Engine(verbose=args.verbose)
    if args.alpha is not None:
        _engine.set_blend_weight(args.alpha)
    try:
        _engine.load(args.dict_path)
    except LoadError as e:
        # the server still starts; POST /api/load can supply a dictionary later
        log.warning("Starting without a dictionary (code %d): %s", e.code, e)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.unload()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
