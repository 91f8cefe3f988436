"""FastAPI web app: site builder form with live preview."""

import asyncio
import logging
from dataclasses import asdict

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from .bundle import archive_name, build_archive
from .enrich import refine_description
from .generator import generate_site
from .models import BusinessProfile, default_profile, profile_from_dict
from .themes import DEFAULT_THEME, THEMES
from .validation import validate_profile

load_dotenv()

logger = logging.getLogger(__name__)

app = FastAPI(title="Site Builder")


@app.get("/", response_class=HTMLResponse)
async def index():
    return INDEX_HTML


@app.get("/api/themes")
async def themes():
    return {
        "default": DEFAULT_THEME,
        "themes": [
            {"id": t.theme_id, "label": t.label, "forceSerif": t.force_serif}
            for t in THEMES.values()
        ],
    }


@app.get("/api/default-profile")
async def default_profile_payload():
    return asdict(default_profile())


@app.post("/api/preview", response_class=HTMLResponse)
async def preview(request: Request):
    """Render index.html for the iframe. Called on every edit."""
    profile = await _read_profile(request)
    return generate_site(profile).markup


@app.post("/api/generate")
async def generate(request: Request):
    profile = await _read_profile(request)
    site = generate_site(profile)
    return {
        "markup": site.markup,
        "stylesheet": site.stylesheet,
        "behaviorScript": site.behavior_script,
    }


@app.post("/api/validate")
async def validate(request: Request):
    profile = await _read_profile(request)
    errors = validate_profile(profile)
    return {"valid": not errors, "errors": errors}


@app.post("/api/refine")
async def refine(request: Request):
    data = await _read_json(request)
    name = str(data.get("name") or "")
    description = str(data.get("description") or "")
    try:
        refined = await asyncio.to_thread(refine_description, name, description)
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"description": refined}


@app.post("/api/download")
async def download(request: Request):
    """Validated zip of index.html, style.css and script.js."""
    profile = await _read_profile(request)
    errors = validate_profile(profile)
    if errors:
        return JSONResponse({"detail": "Profile is incomplete.", "errors": errors}, status_code=422)

    archive = build_archive(generate_site(profile))
    filename = archive_name(profile.name)
    logger.info("Built archive %s (%d bytes)", filename, len(archive))
    return Response(
        content=archive,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


async def _read_json(request: Request) -> dict:
    try:
        data = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be JSON.")
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object.")
    return data


async def _read_profile(request: Request) -> BusinessProfile:
    data = await _read_json(request)
    try:
        return profile_from_dict(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ---------------------------------------------------------------------------
# Inline HTML — single page builder
# ---------------------------------------------------------------------------

INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Site Builder</title>
<style>
  *, *::before, *::after { margin: 0; padding: 0; box-sizing: border-box; }

  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    background: #f0f2f5;
    color: #1a1a2e;
    min-height: 100vh;
  }

  .layout {
    display: grid;
    grid-template-columns: 420px 1fr;
    gap: 24px;
    padding: 24px;
    height: 100vh;
  }

  .card {
    background: white;
    border-radius: 16px;
    box-shadow: 0 1px 3px rgba(0,0,0,0.08), 0 8px 24px rgba(0,0,0,0.06);
    padding: 32px;
    overflow-y: auto;
  }

  h1 { font-size: 22px; font-weight: 700; margin-bottom: 4px; }

  .subtitle { font-size: 13px; color: #6b7280; margin-bottom: 24px; }

  label {
    display: block;
    font-size: 13px;
    font-weight: 600;
    color: #4a5568;
    margin: 14px 0 6px;
  }

  input[type="text"], textarea, select {
    width: 100%;
    padding: 10px 14px;
    border: 1px solid #d1d5db;
    border-radius: 10px;
    font-size: 14px;
    font-family: inherit;
    outline: none;
  }

  textarea { height: 110px; resize: vertical; }

  input.invalid, textarea.invalid { border-color: #ef4444; }

  .field-error { font-size: 11px; color: #b91c1c; margin-top: 4px; min-height: 1em; }

  .row { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }

  button {
    padding: 12px 20px;
    background: #1a1a2e;
    color: white;
    border: none;
    border-radius: 10px;
    font-size: 14px;
    font-weight: 600;
    cursor: pointer;
  }

  button:hover { background: #2a2a4e; }
  button:disabled { background: #9ca3af; cursor: not-allowed; }

  .actions { display: flex; gap: 10px; margin-top: 24px; }

  .preview {
    background: white;
    border-radius: 16px;
    overflow: hidden;
    box-shadow: 0 8px 24px rgba(0,0,0,0.08);
  }

  iframe { width: 100%; height: 100%; border: none; }
</style>
</head>
<body>
<div class="layout">
  <form class="card" id="form">
    <h1>Site Builder</h1>
    <p class="subtitle">Fill in your business details. The preview updates as you type.</p>

    <label for="name">Business Name</label>
    <input type="text" id="name" name="name">
    <div class="field-error" data-for="name"></div>

    <label for="description">Description</label>
    <textarea id="description" name="description"></textarea>
    <button type="button" id="refine">Refine with AI</button>
    <div class="field-error" data-for="description"></div>

    <div class="row">
      <div>
        <label for="phoneDisplay">Phone</label>
        <input type="text" id="phoneDisplay" name="phoneDisplay">
        <div class="field-error" data-for="phone_display"></div>
      </div>
      <div>
        <label for="whatsappNumber">WhatsApp</label>
        <input type="text" id="whatsappNumber" name="whatsappNumber">
        <div class="field-error" data-for="whatsapp_number"></div>
      </div>
    </div>

    <label for="address">Address</label>
    <input type="text" id="address" name="address">
    <div class="field-error" data-for="address"></div>

    <label for="services">Services (comma separated)</label>
    <input type="text" id="services" name="services">
    <div class="field-error" data-for="services"></div>

    <div class="row">
      <div>
        <label for="themeId">Theme</label>
        <select id="themeId" name="themeId"></select>
      </div>
      <div>
        <label for="themeColor">Theme Color</label>
        <input type="text" id="themeColor" name="themeColor">
      </div>
    </div>

    <div class="row">
      <div>
        <label for="serviceColumns">Columns</label>
        <select id="serviceColumns" name="serviceColumns">
          <option value="1">1</option><option value="2">2</option><option value="3" selected>3</option>
        </select>
      </div>
      <div>
        <label for="fontStyle">Font</label>
        <select id="fontStyle" name="fontStyle">
          <option value="sans">Sans</option><option value="serif">Serif</option>
        </select>
      </div>
    </div>

    <label for="instagram">Instagram URL</label>
    <input type="text" id="instagram" data-social="instagram">
    <label for="facebook">Facebook URL</label>
    <input type="text" id="facebook" data-social="facebook">
    <label for="linkedin">LinkedIn URL</label>
    <input type="text" id="linkedin" data-social="linkedin">

    <label for="logoImage">Logo</label>
    <input type="file" id="logoImage" accept="image/*" data-image="logoImage">
    <label for="heroImage">Hero Image</label>
    <input type="file" id="heroImage" accept="image/*" data-image="heroImage">
    <label for="aboutImage">About Image</label>
    <input type="file" id="aboutImage" accept="image/*" data-image="aboutImage">

    <div class="actions">
      <button type="button" id="download">Download Project</button>
    </div>
  </form>

  <div class="preview"><iframe id="preview" title="Preview"></iframe></div>
</div>

<script>
const form = document.getElementById('form');
const frame = document.getElementById('preview');
let timer = null;
const images = {};

function collect() {
  const data = {};
  form.querySelectorAll('[name]').forEach((el) => { data[el.name] = el.value; });
  data.socialLinks = {};
  form.querySelectorAll('[data-social]').forEach((el) => { data.socialLinks[el.dataset.social] = el.value; });
  Object.assign(data, images);
  return data;
}

async function post(path, body) {
  return fetch(path, {
    method: 'POST',
    headers: { 'Content-Type': 'application/json' },
    body: JSON.stringify(body),
  });
}

function showErrors(errors) {
  form.querySelectorAll('.field-error').forEach((el) => {
    el.textContent = errors[el.dataset.for] || '';
  });
}

async function refresh() {
  const data = collect();
  const resp = await post('/api/preview', data);
  if (resp.ok) frame.srcdoc = await resp.text();
  const check = await post('/api/validate', data);
  if (check.ok) showErrors((await check.json()).errors);
}

form.querySelectorAll('[data-image]').forEach((el) => {
  el.addEventListener('change', () => {
    const file = el.files[0];
    if (!file) return;
    const reader = new FileReader();
    reader.onloadend = () => {
      images[el.dataset.image] = reader.result;
      refresh();
    };
    reader.readAsDataURL(file);
  });
});

form.addEventListener('input', () => {
  clearTimeout(timer);
  timer = setTimeout(refresh, 150);
});

document.getElementById('refine').addEventListener('click', async (e) => {
  const btn = e.target;
  btn.disabled = true;
  btn.textContent = 'Polishing...';
  const data = collect();
  const resp = await post('/api/refine', { name: data.name, description: data.description });
  if (resp.ok) {
    document.getElementById('description').value = (await resp.json()).description;
    refresh();
  }
  btn.disabled = false;
  btn.textContent = 'Refine with AI';
});

document.getElementById('download').addEventListener('click', async () => {
  const resp = await post('/api/download', collect());
  if (resp.status === 422) {
    showErrors((await resp.json()).errors);
    alert('Please fix the errors in the form before downloading.');
    return;
  }
  if (!resp.ok) return;
  const blob = await resp.blob();
  const match = /filename="([^"]+)"/.exec(resp.headers.get('Content-Disposition') || '');
  const link = document.createElement('a');
  link.href = URL.createObjectURL(blob);
  link.download = match ? match[1] : 'website.zip';
  link.click();
});

async function init() {
  const themes = await (await fetch('/api/themes')).json();
  const select = document.getElementById('themeId');
  themes.themes.forEach((t) => {
    const opt = document.createElement('option');
    opt.value = t.id;
    opt.textContent = t.label;
    select.appendChild(opt);
  });

  const profile = await (await fetch('/api/default-profile')).json();
  document.getElementById('name').value = profile.name;
  document.getElementById('description').value = profile.description;
  document.getElementById('address').value = profile.address;
  document.getElementById('themeColor').value = profile.theme_color;
  document.getElementById('phoneDisplay').value = profile.phone_display;
  document.getElementById('whatsappNumber').value = profile.whatsapp_number;
  document.getElementById('services').value = profile.services.map((s) => s.title).join(', ');
  select.value = profile.theme_id;
  refresh();
}

init();
</script>
</body>
</html>
"""
