"""
HTML form served at the root of the web calculator
"""

import html

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    body {{ font-family: sans-serif; max-width: 420px; margin: 40px auto; }}
    .row {{ display: flex; gap: 8px; margin-bottom: 12px; }}
    input, select, button {{ font-size: 1rem; padding: 6px; }}
    .result {{ padding: 10px; background: #f1f5f9; border-radius: 4px; margin: 12px 0; }}
    .result.error {{ background: #fee2e2; color: #b91c1c; }}
    .history-item {{ padding: 4px 0; border-bottom: 1px solid #e2e8f0; }}
    .history-empty {{ color: #64748b; font-style: italic; }}
  </style>
</head>
<body>
  <h1>{title}</h1>
  <div class="row">
    <input id="num1" type="text" placeholder="First number">
    <select id="operation">
      <option value="+">+</option>
      <option value="-">-</option>
      <option value="*">*</option>
      <option value="/">/</option>
    </select>
    <input id="num2" type="text" placeholder="Second number">
  </div>
  <div class="row">
    <button id="calculateBtn">Calculate</button>
    <button id="clearBtn">Clear</button>
  </div>
  <div id="result" class="result">{placeholder}</div>

  <h2>History</h2>
  <div id="historyList"></div>
  <button id="clearHistoryBtn">Clear History</button>

  <script>
    function renderHistory(history) {{
      const list = document.getElementById('historyList');
      list.replaceChildren();
      history.lines.forEach((line) => {{
        const item = document.createElement('div');
        item.className = history.count === 0 ? 'history-empty' : 'history-item';
        item.textContent = line;
        list.appendChild(item);
      }});
    }}

    async function postJSON(url, body) {{
      const response = await fetch(url, {{
        method: 'POST',
        headers: {{ 'Content-Type': 'application/json' }},
        body: body === undefined ? undefined : JSON.stringify(body)
      }});
      const data = await response.json();
      if (!response.ok) {{
        const detail = typeof data.detail === 'string' ? data.detail : JSON.stringify(data.detail);
        throw new Error(detail || response.statusText);
      }}
      return data;
    }}

    function showError(message) {{
      const result = document.getElementById('result');
      result.textContent = `Error: ${{message}}`;
      result.className = 'result error';
    }}

    async function handleCalculate() {{
      const result = document.getElementById('result');
      let data;
      try {{
        data = await postJSON('/calculate', {{
          num1: document.getElementById('num1').value,
          num2: document.getElementById('num2').value,
          operation: document.getElementById('operation').value
        }});
      }} catch (error) {{
        showError(error.message);
        return;
      }}
      result.textContent = data.message;
      result.className = data.success ? 'result' : 'result error';
      renderHistory(data.history);
    }}

    async function handleClear() {{
      document.getElementById('num1').value = '';
      document.getElementById('num2').value = '';
      const data = await postJSON('/clear');
      const result = document.getElementById('result');
      result.textContent = data.result;
      result.className = 'result';
    }}

    async function handleClearHistory() {{
      try {{
        renderHistory(await postJSON('/history/clear'));
      }} catch (error) {{
        showError(error.message);
      }}
    }}

    document.addEventListener('DOMContentLoaded', async () => {{
      document.getElementById('calculateBtn').addEventListener('click', handleCalculate);
      document.getElementById('clearBtn').addEventListener('click', handleClear);
      document.getElementById('clearHistoryBtn').addEventListener('click', handleClearHistory);

      ['num1', 'num2'].forEach((id) => {{
        document.getElementById(id).addEventListener('keypress', (event) => {{
          if (event.key === 'Enter') {{
            handleCalculate();
          }}
        }});
      }});

      const response = await fetch('/history');
      renderHistory(await response.json());
    }});
  </script>
</body>
</html>
"""


def render_page(title: str, placeholder: str) -> str:
    return PAGE_TEMPLATE.format(title=html.escape(title), placeholder=html.escape(placeholder))
