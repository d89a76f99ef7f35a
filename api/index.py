# api/index.py

from http.server import BaseHTTPRequestHandler

HTML = """<!DOCTYPE html>
<html><head>
<meta charset=\"utf-8\"><title>GitHub Stats Analyzer</title>
<style>
body { font-family: system-ui, sans-serif; background: #010409; color: #c9d1d9; max-width: 820px; margin: 40px auto; padding: 20px; }
a { color: #58a6ff; } code { background: #21262d; padding: 2px 6px; border-radius: 4px; }
pre { background: #161b22; padding: 16px; border-radius: 6px; overflow-x: auto; }
h1 { border-bottom: 1px solid #30363d; padding-bottom: 10px; }
input { width: 70%; padding: 10px 14px; background: #0d1117; color: #c9d1d9; border: 1px solid #30363d; border-radius: 20px; }
button { padding: 10px 18px; background: #238636; color: #fff; border: 0; border-radius: 20px; cursor: pointer; }
.card { margin: 24px 0; padding: 20px; background: #0d1117; border: 1px solid #30363d; border-radius: 10px; display: none; }
.row { display: flex; gap: 24px; align-items: center; }
.legend div { display: flex; justify-content: space-between; gap: 16px; margin: 6px 0; }
.dot { display: inline-block; width: 10px; height: 10px; border-radius: 50%; margin-right: 8px; }
.muted { color: #8b949e; font-size: 12px; }
.warn { color: #d29922; } .err { color: #f85149; }
.endpoint { margin: 20px 0; padding: 16px; background: #161b22; border-radius: 6px; border-left: 3px solid #58a6ff; }
</style>
</head><body>
<h1>GitHub Stats Analyzer</h1>
<p>Language breakdown for any user or a specific repository.</p>

<form id=\"f\"><input id=\"q\" placeholder=\"username (e.g. facebook) OR owner/repo\"> <button>Analyze</button></form>
<p id=\"msg\"></p>
<div class=\"card\" id=\"card\">
  <div class=\"row\">
    <img id=\"avatar\" width=\"64\" height=\"64\" style=\"border-radius: 50%\">
    <div><h2 id=\"name\" style=\"margin: 0\"></h2><div class=\"muted\" id=\"login\"></div><p id=\"bio\"></p><div class=\"muted\" id=\"metrics\"></div></div>
  </div>
  <div class=\"row\">
    <svg width=\"240\" height=\"240\" style=\"transform: rotate(-90deg)\" id=\"donut\"></svg>
    <div class=\"legend\" id=\"legend\" style=\"flex: 1\"></div>
  </div>
  <p class=\"muted\" id=\"basis\"></p>
</div>

<div class=\"endpoint\">
<h3>GET <code>/api/language_stats</code></h3>
<p>Donut SVG card. Embed in READMEs or anywhere that renders images.</p>
<pre>?search=octocat | octocat/Hello-World
&amp;theme=dark|light
&amp;fallback=demo</pre>
</div>

<div class=\"endpoint\">
<h3>GET <code>/api/analyze</code></h3>
<p>The same analysis as JSON: stats, donut segments and profile.</p>
<pre>?search=octocat
&amp;demo=1</pre>
</div>

<script>
const $ = (id) => document.getElementById(id);
const esc = (s) => String(s).replace(/[&<>\"]/g, (c) => ({'&': '&amp;', '<': '&lt;', '>': '&gt;', '\"': '&quot;'}[c]));

function draw(data) {
  const p = data.profile;
  $('avatar').src = p.avatar_url;
  $('avatar').style.borderRadius = data.avatar_shape === 'square' ? '6px' : '50%';
  $('name').innerHTML = `<a href=\"${esc(p.external_url)}\" target=\"_blank\" rel=\"noreferrer\">${esc(p.display_name)}</a>`;
  $('login').textContent = '@' + p.login;
  $('bio').textContent = data.bio_display;
  const metrics = [p.secondary_metric, ...p.extra_metrics].map((m) => `${m.value} ${m.label}`);
  metrics.push(`${data.total_value.toLocaleString()} KB Analyzed`);
  $('metrics').textContent = metrics.join(' • ');

  let rings = '<circle cx=\"120\" cy=\"120\" r=\"100\" fill=\"transparent\" stroke=\"#30363d\" stroke-width=\"20\"/>';
  for (const seg of data.segments) {
    if (seg.arc_length <= 0) continue;
    rings += `<circle cx=\"120\" cy=\"120\" r=\"100\" fill=\"transparent\" stroke=\"${seg.color}\" stroke-width=\"20\" stroke-dasharray=\"${seg.dash_array}\" stroke-dashoffset=\"${seg.arc_offset}\"><title>${esc(seg.name)}</title></circle>`;
  }
  $('donut').innerHTML = rings;
  $('legend').innerHTML = data.stats.length ? data.stats.map((s) =>
    `<div><span><span class=\"dot\" style=\"background:${s.color}\"></span>${esc(s.name)}</span><span class=\"muted\">${s.value.toLocaleString()} KB <b>${s.percent.toFixed(1)}%</b></span></div>`
  ).join('') : '<p class=\"muted\">No language data found.</p>';
  $('basis').textContent = data.basis + (data.demo ? ' (demo data)' : '');
  $('card').style.display = 'block';
}

async function run(search, demo) {
  const url = new URL(window.location.href);
  url.searchParams.set('search', search);
  window.history.pushState({}, '', url.toString());
  $('msg').className = ''; $('msg').textContent = 'Crunching the numbers...';
  $('card').style.display = 'none';
  const resp = await fetch('/api/analyze?' + new URLSearchParams(demo ? {demo: '1'} : {search}));
  const data = await resp.json();
  $('msg').textContent = '';
  if (resp.ok) return draw(data);
  if (data.kind === 'rate_limited') {
    $('msg').className = 'warn';
    $('msg').innerHTML = 'GitHub API rate limit exceeded. <a href=\"#\" id=\"demo\">See demo data instead</a>';
    $('demo').onclick = (e) => { e.preventDefault(); run(search, true); };
  } else {
    $('msg').className = 'err';
    $('msg').textContent = data.error;
  }
}

$('f').onsubmit = (e) => { e.preventDefault(); const v = $('q').value.trim(); if (v) run(v); };
const initial = new URLSearchParams(window.location.search).get('search');
if (initial) { $('q').value = initial; run(initial); }
</script>
</body></html>"""


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.end_headers()
        self.wfile.write(HTML.encode())
