"""HTML pages served by the shop.

Plain Jinja templates rendered with ``render_template_string``.  The
storefront exposes the counter in ``#stock-count`` and refreshes it from
``/api/stock`` every three seconds, which is what sniper bots scrape.
"""

STOCK_POLL_INTERVAL_MS = 3000

STOREFRONT = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>Poke Test Drop</title>
  <style>
    body{font-family:system-ui,Arial;margin:0;padding:24px;background:#f7fbff}
    .card{max-width:760px;margin:24px auto;background:white;padding:20px;border-radius:12px;box-shadow:0 6px 20px rgba(20,30,60,0.08)}
    button{padding:8px 12px;border-radius:8px;border:0;background:#2563eb;color:white}
    .btn-muted{background:#e5e7eb;color:#111}
    input[type=number]{width:72px;padding:6px;border-radius:6px;border:1px solid #ddd}
    pre{background:#f3f4f6;padding:8px;border-radius:6px}
  </style>
</head>
<body>
  <div class="card">
    <h1>Pikachu Shiny Drop: Test Item</h1>
    <p>This page exposes <code id="stock-count">{{ stock }}</code> as the stock counter for your sniper bot to scrape.</p>
    <div style="display:flex;gap:12px;align-items:center;margin-top:12px;">
      <label>Qty <input id="qty" type="number" min="1" value="1" /></label>
      <button id="buy">Buy (simulate)</button>
      <button id="checkout" class="btn-muted">Go to Checkout</button>
      <button id="copy">Copy URL</button>
    </div>
    <p id="message" style="margin-top:12px;color:#555"></p>
    <p style="margin-top:12px;color:#555">Tip: point your bot at <code>/api/stock</code> or parse the DOM element <code>#stock-count</code>.</p>
    <hr />
    <h3>Example API check</h3>
    <pre id="apiout">GET /api/stock -> {"stock": {{ stock }}}</pre>
  </div>

  <script>
    async function updateStockUI(){
      const r = await fetch('/api/stock');
      const j = await r.json();
      document.getElementById('stock-count').innerText = j.stock;
      document.getElementById('apiout').innerText = 'GET /api/stock -> ' + JSON.stringify(j);
    }
    document.getElementById('buy').onclick = async () => {
      const qty = Number(document.getElementById('qty').value || 1);
      const r = await fetch('/api/purchase', {method:'POST', headers:{'content-type':'application/json'}, body:JSON.stringify({ qty })});
      const j = await r.json();
      if (!j.ok) { document.getElementById('message').innerText = 'Error: ' + j.message; return; }
      await updateStockUI();
      document.getElementById('message').innerText = 'Simulated purchase OK';
    };
    document.getElementById('checkout').onclick = () => window.location.href = '/checkout';
    document.getElementById('copy').onclick = async () => {
      await navigator.clipboard.writeText(window.location.href);
      document.getElementById('message').innerText = 'URL copied';
    };
    setInterval(updateStockUI, {{ poll_ms }});
  </script>
</body>
</html>
"""

CHECKOUT = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>Checkout - Test</title>
  <style>
    body{font-family:system-ui,Arial;padding:20px;background:#fff}
    .wrap{max-width:640px;margin:0 auto}
    label{display:block;margin:10px 0}
    input{padding:8px;border-radius:6px;border:1px solid #ccc;width:100%}
    button{padding:10px 14px;border-radius:8px;border:0;background:#10b981;color:white}
  </style>
</head>
<body>
  <div class="wrap">
    <h2>Checkout (Test only)</h2>
    <p style="color:#b91c1c">Important: Do <strong>not</strong> enter real card details. Use test card numbers such as 4242 4242 4242 4242.</p>
    <form id="checkoutForm">
      <label>Full name <input name="name" required /></label>
      <label>Card number <input name="cardNumber" id="cardNumber" required placeholder="4242 4242 4242 4242" /></label>
      <label>Expiry (MM/YY) <input name="expiry" required placeholder="08/27" /></label>
      <label>CVC <input name="cvc" required placeholder="123" /></label>
      <label>Qty <input name="qty" id="qty" type="number" min="1" value="1" /></label>
      <button type="submit">Simulate payment</button>
    </form>
    <div id="result" style="margin-top:12px;color:#064e3b"></div>
  </div>

  <script>
    function luhnCheck(num){
      const s = String(num).replace(/\\D/g, '');
      let sum = 0, dbl = false;
      for (let i = s.length - 1; i >= 0; i--) { let d = +s[i]; if (dbl) { d *= 2; if (d > 9) d -= 9; } sum += d; dbl = !dbl; }
      return sum % 10 === 0;
    }
    document.getElementById('checkoutForm').onsubmit = async (e) => {
      e.preventDefault();
      const payload = Object.fromEntries(new FormData(e.target).entries());
      const result = document.getElementById('result');
      if (!luhnCheck(payload.cardNumber || '')) {
        result.innerText = 'Card number failed basic Luhn check. Use a test card like 4242 4242 4242 4242.';
        return;
      }
      const res = await fetch('/api/checkout', {method:'POST', headers:{'content-type':'application/json'}, body:JSON.stringify(payload)});
      const j = await res.json();
      if (!j.ok) { result.innerText = 'Error: ' + j.message; return; }
      result.innerText = j.message + ' Remaining stock: ' + j.stock;
    };
  </script>
</body>
</html>
"""

ADMIN = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>Admin - Set Stock</title></head>
<body style="font-family:system-ui,Arial;line-height:1.5;padding:20px;">
  <h2>Admin Panel</h2>
  <p>Current stock: <strong id="stock">{{ stock }}</strong></p>
  <label>Set stock: <input id="newstock" type="number" min="0" value="{{ stock }}" /></label>
  <button id="set">Set</button>
  <button id="reset">Reset to 1</button>
  <p id="status"></p>

  <script>
    const ADMIN_KEY = {{ admin_key|tojson }};
    async function setStock(value, label){
      const r = await fetch('/api/admin/set-stock', {method:'POST', headers:{'content-type':'application/json'}, body:JSON.stringify({ key: ADMIN_KEY, stock: value })});
      const j = await r.json();
      if (!j.ok) { document.getElementById('status').innerText = 'Error: ' + j.message; return; }
      document.getElementById('stock').innerText = j.stock;
      document.getElementById('status').innerText = label;
    }
    document.getElementById('set').onclick = () => setStock(Number(document.getElementById('newstock').value || 0), 'Updated');
    document.getElementById('reset').onclick = () => setStock(1, 'Reset');
  </script>
</body>
</html>
"""

UNAUTHORIZED = "<h3>Unauthorized</h3><p>Provide ?key=YOURKEY</p>"
