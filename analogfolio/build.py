"""
Analogfolio: build a static analog photography portfolio from a Cloudinary folder.

Usage:
    analogfolio-build            (or: python -m analogfolio)

Reads CLOUDINARY_FOLDER, NEXT_PUBLIC_CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY
and CLOUDINARY_API_SECRET from the environment.
Outputs a static site to ./public_html/ (ANALOGFOLIO_SITE_DIR).
"""

import asyncio
import json
import logging
from datetime import date
from pathlib import Path

import httpx
from jinja2 import Environment

from . import config
from .blur import fetch_placeholder
from .cache import ListingCache
from .errors import PhotoNotFound
from .facets import facet_options, option_label
from .lightbox import KEY_BINDINGS, Lightbox
from .media import MediaClient, detail_url, grid_url
from .pages import PageAssembler

_jinja_env = Environment(autoescape=True)
_jinja_env.filters["option_label"] = option_label
Template = _jinja_env.from_string

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

FACET_LABELS = {"camera": "Camera", "film": "Film", "theme": "Thema"}


def setup_logging(level: str = "INFO") -> None:
    try:
        numeric = getattr(logging, level.upper())
    except AttributeError as exc:
        raise ValueError(f"Unknown log level: {level}") from exc
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


# ---------------------------------------------------------------------------
# Shared CSS (written to assets/style.css)
# ---------------------------------------------------------------------------

SHARED_CSS = """\
/* ── reset & base ── */
*, *::before, *::after { box-sizing: border-box; }
body {
  margin: 0; padding: 0;
  font-family: "Inter", "SF Pro Text", system-ui, -apple-system, sans-serif;
  font-size: 15px; line-height: 1.6;
  background: #000; color: rgba(255,255,255,0.8);
  -webkit-font-smoothing: antialiased;
}
a { color: #fff; text-decoration: none; transition: color 0.15s; }
h1, h2, h3 { color: #fff; }
button, .button {
  display: inline-block; cursor: pointer; font: inherit; font-weight: 600;
  padding: 10px 22px; border-radius: 8px; border: 1px solid #fff;
  background: #fff; color: #000;
}
.button.ghost { background: transparent; color: #fff; }

/* ── nav ── */
.topnav {
  position: fixed; top: 0; left: 0; right: 0; z-index: 50; height: 64px;
  display: flex; align-items: center; justify-content: space-between;
  padding: 0 24px; background: rgba(0,0,0,0.2); backdrop-filter: blur(12px);
  border-bottom: 1px solid rgba(255,255,255,0.1);
}
.topnav .brand { font-size: 1.25em; font-weight: 700; color: #fff; }
.topnav .links { display: flex; gap: 28px; align-items: center; }
.topnav .links a { color: rgba(255,255,255,0.8); }
.topnav .links a:hover { color: #fff; }

main { max-width: 1960px; margin: 0 auto; padding: 80px 16px 16px; }

/* ── grid ── */
.grid { columns: 1; column-gap: 16px; }
.grid > * { break-inside: avoid; margin-bottom: 20px; }
.hero {
  display: flex; flex-direction: column; justify-content: flex-end; align-items: center;
  height: 629px; padding: 0 24px 64px; text-align: center; border-radius: 8px;
  background: linear-gradient(135deg, #111827, #1f2937, #000);
}
.hero p { max-width: 40ch; }
.filters {
  column-span: all; padding: 16px; border-radius: 8px;
  background: rgba(255,255,255,0.05); border: 1px solid rgba(255,255,255,0.1);
  display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px;
}
.filters label { display: block; font-size: 0.88em; margin-bottom: 4px; }
.filters select, .booking input, .booking select, .booking textarea {
  width: 100%; padding: 8px 12px; font: inherit; color: #fff;
  background: rgba(255,255,255,0.1); border: 1px solid rgba(255,255,255,0.2); border-radius: 6px;
}
.photo {
  display: block; position: relative; cursor: zoom-in; border-radius: 8px;
  overflow: hidden; background-size: cover; background-position: center;
}
.photo img {
  width: 100%; height: auto; display: block; filter: brightness(0.9);
  transition: filter 0.25s ease;
}
.photo:hover img { filter: brightness(1.1); }
.photo[hidden] { display: none; }
.empty { column-span: all; text-align: center; padding: 80px 0; color: rgba(255,255,255,0.6); }

/* ── sections ── */
section { padding: 80px 16px; max-width: 1024px; margin: 0 auto; }
section h2 { font-size: 1.9em; text-align: center; margin-bottom: 40px; }
.columns { display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 32px; }
.card { background: rgba(255,255,255,0.05); padding: 24px; border-radius: 8px; border: 1px solid rgba(255,255,255,0.1); }
.contact { text-align: center; }
.contact .actions { display: flex; gap: 24px; justify-content: center; flex-wrap: wrap; }

/* ── modal & lightbox ── */
.overlay {
  position: fixed; inset: 0; z-index: 60; display: flex;
  align-items: center; justify-content: center; padding: 16px;
  background: rgba(0,0,0,0.9); backdrop-filter: blur(40px);
}
.overlay[hidden] { display: none; }
.booking { background: #111827; border: 1px solid rgba(255,255,255,0.2); border-radius: 8px; padding: 32px; max-width: 28rem; width: 100%; }
.booking form > * { margin-bottom: 16px; }
.lightbox img { max-width: 100%; max-height: 88vh; border-radius: 4px; transition: transform 0.3s ease, opacity 0.3s ease; }
.lightbox img.enter-forward { transform: translateX(40px); opacity: 0; }
.lightbox img.enter-backward { transform: translateX(-40px); opacity: 0; }
.lightbox .close { position: fixed; top: 16px; right: 16px; border-radius: 999px; padding: 8px 14px; background: rgba(0,0,0,0.5); color: #fff; border: 0; }
.lightbox .info { position: fixed; top: 16px; left: 16px; color: #fff; font-size: 0.88em; }
.lightbox .prev, .lightbox .next {
  position: fixed; top: 50%; transform: translateY(-50%); border-radius: 999px;
  padding: 10px 16px; background: rgba(0,0,0,0.5); color: #fff; border: 0;
}
.lightbox .prev { left: 16px; }
.lightbox .next { right: 16px; }
.lightbox .prev[hidden], .lightbox .next[hidden] { display: none; }

/* ── photo page ── */
.photo-page { max-width: 1400px; margin: 0 auto; padding: 24px 16px; }
.photo-page .nav { display: flex; gap: 16px; margin-bottom: 20px; font-size: 0.88em; }
.photo-page .nav a { color: rgba(255,255,255,0.6); }
.photo-page .nav a:hover { color: #fff; }
.photo-page .media img {
  max-width: 100%; max-height: 82vh; display: block; margin: 0 auto;
  border-radius: 4px; background-size: cover;
}
.photo-page .meta { margin-top: 16px; font-size: 0.88em; color: rgba(255,255,255,0.6); }

footer { padding: 48px 24px; text-align: center; border-top: 1px solid rgba(255,255,255,0.1); }

/* ── responsive ── */
@media (min-width: 640px) { .grid { columns: 2; } }
@media (min-width: 1280px) { .grid { columns: 3; } }
@media (min-width: 1536px) { .grid { columns: 4; } }
@media (max-width: 768px) {
  .topnav .links a { display: none; }
  .filters { grid-template-columns: 1fr; }
}
"""

# Client side of facets.filter_images / visible_images and lightbox.Lightbox.
PORTFOLIO_JS = """\
(function() {
  var data = JSON.parse(document.getElementById('portfolio-data').textContent);
  var images = data.images;
  var keys = data.keys;
  var links = Array.from(document.querySelectorAll('.grid a.photo'));

  // ── filters: AND across selects, show everything when nothing matches ──
  var selects = Array.from(document.querySelectorAll('.filters select'));
  function applyFilters() {
    var wanted = selects.map(function(s) { return s.value.toLowerCase(); })
                        .filter(function(v) { return v; });
    var matches = links.filter(function(a) {
      var tags = JSON.parse(a.dataset.tags).map(function(t) { return t.toLowerCase(); });
      return wanted.every(function(w) { return tags.indexOf(w) !== -1; });
    });
    if (!matches.length) matches = links;
    links.forEach(function(a) { a.hidden = matches.indexOf(a) === -1; });
  }
  selects.forEach(function(s) { s.addEventListener('change', applyFilters); });

  // ── booking modal ──
  var booking = document.getElementById('booking');
  document.querySelectorAll('[data-open-booking]').forEach(function(b) {
    b.addEventListener('click', function() { booking.hidden = false; });
  });
  document.querySelectorAll('[data-close-booking]').forEach(function(b) {
    b.addEventListener('click', function() { booking.hidden = true; });
  });

  // ── lightbox ──
  var box = document.getElementById('lightbox');
  var img = box.querySelector('img');
  var counter = box.querySelector('.counter');
  var prevBtn = box.querySelector('.prev');
  var nextBtn = box.querySelector('.next');
  var openIndex = null;

  function locationFor(i) { return i === null ? '/' : '/p/' + i; }
  function indexFromLocation() {
    var m = location.pathname.match(/^\\/p\\/(\\d+)\\/?$/) ||
            location.search.match(/[?&]photoId=(\\d+)(?:&|$)/);
    if (!m) return null;
    var i = parseInt(m[1], 10);
    return i < images.length ? i : null;
  }

  function show(i, direction) {
    var photo = images[i];
    img.className = direction > 0 ? 'enter-forward' : direction < 0 ? 'enter-backward' : '';
    img.style.backgroundImage = photo.blur ? 'url(' + photo.blur + ')' : '';
    img.src = photo.src;
    img.alt = photo.caption || 'Analog photography portfolio';
    requestAnimationFrame(function() { img.className = ''; });
    counter.textContent = 'Photo ' + (i + 1) + ' of ' + images.length;
    prevBtn.hidden = i <= 0;
    nextBtn.hidden = i + 1 >= images.length;
    box.hidden = false;
  }

  function go(i, push) {
    var direction = openIndex === null ? 0 : Math.sign(i - openIndex);
    openIndex = i;
    show(i, direction);
    if (push) history.pushState({photoId: i}, '', locationFor(i));
  }

  var actions = {
    next: function() { if (openIndex + 1 < images.length) go(openIndex + 1, true); },
    previous: function() { if (openIndex > 0) go(openIndex - 1, true); },
    close: function() { close(true); }
  };

  function close(push) {
    if (openIndex === null) return;
    sessionStorage.setItem('lastViewedPhoto', String(openIndex));
    openIndex = null;
    box.hidden = true;
    img.removeAttribute('src');
    if (push) history.pushState({}, '', locationFor(null));
    scrollToLastViewed();
  }

  function scrollToLastViewed() {
    var last = sessionStorage.getItem('lastViewedPhoto');
    if (last === null || openIndex !== null) return;
    sessionStorage.removeItem('lastViewedPhoto');
    var a = document.querySelector('.grid a.photo[data-id="' + last + '"]');
    if (a) a.scrollIntoView({block: 'center'});
  }

  links.forEach(function(a) {
    a.addEventListener('click', function(e) {
      e.preventDefault();
      go(parseInt(a.dataset.id, 10), true);
    });
  });
  box.querySelector('.close').addEventListener('click', actions.close);
  prevBtn.addEventListener('click', actions.previous);
  nextBtn.addEventListener('click', actions.next);
  document.addEventListener('keydown', function(e) {
    if (openIndex === null || !keys[e.key]) return;
    actions[keys[e.key]]();
  });
  window.addEventListener('popstate', function() {
    var i = indexFromLocation();
    if (i === null) close(false); else go(i, false);
  });

  var initial = indexFromLocation();
  if (initial !== null) go(initial, false); else scrollToLastViewed();
})();
"""

BASE_HEAD = """\
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<link rel="stylesheet" href="/assets/style.css">
"""

INDEX_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="nl">
<head>
""" + BASE_HEAD + """\
<title>{{ site_title }}</title>
<meta name="description" content="{{ site_description }}">
<meta property="og:image" content="/og-image.png">
<meta name="twitter:image" content="/og-image.png">
</head>
<body>
<nav class="topnav">
  <span class="brand">{{ photographer }}</span>
  <div class="links">
    <a href="#portfolio">Portfolio</a>
    <a href="#overzicht">Overzicht</a>
    <a href="#apparatuur">Apparatuur</a>
    <a href="#filmvoorraad">Filmvoorraad</a>
    <a href="#contact">Contact</a>
    <button type="button" data-open-booking>Boek een sessie</button>
  </div>
</nav>

<main>
<div id="portfolio" class="grid">
  <div class="hero">
    <h1>Analog Photography</h1>
    <h2>Tijdloze momenten, vastgelegd op film</h2>
    <p>Portretten, events en creatieve projecten. Elke foto vertelt een verhaal, met de authentieke schoonheid van film.</p>
    <div><button type="button" data-open-booking>Boek een sessie</button> <a class="button ghost" href="#overzicht">Lees meer</a></div>
  </div>

  <div class="filters">
  {% for facet, options in facets %}
    <div>
      <label for="filter-{{ facet }}">{{ facet_labels[facet] }}</label>
      <select id="filter-{{ facet }}" name="{{ facet }}">
        <option value="">Alle</option>
        {% for opt in options %}<option value="{{ opt }}">{{ opt|option_label(facet ~ ':') }}</option>{% endfor %}
      </select>
    </div>
  {% endfor %}
  </div>

{% for img in images %}
  <a class="photo" href="/p/{{ img.id }}/" data-id="{{ img.id }}" data-tags="{{ img.tags|tojson|forceescape }}"{% if img.blur_data_url %} style="background-image: url('{{ img.blur_data_url }}')"{% endif %}>
    <img src="{{ img.src }}" alt="{{ img.caption or 'Analog photography portfolio' }}" width="{{ grid_width }}" height="{{ img.grid_height }}" loading="lazy"
         sizes="(max-width: 640px) 100vw, (max-width: 1280px) 50vw, (max-width: 1536px) 33vw, 25vw">
  </a>
{% else %}
  <div class="empty">
    <h3>Geen afbeeldingen gevonden</h3>
    <p>Configureer Cloudinary en upload afbeeldingen om je portfolio te tonen.</p>
  </div>
{% endfor %}
</div>

<section id="overzicht">
  <h2>Overzicht &ndash; jouw fotografieprofiel</h2>
  <h3>Genres / Stijl</h3>
  <p>Focus op creatieve experimenten (Fun Stuffs), optimaal licht (Golden Hour) en technische scherpte (Sharpest Aperture).</p>
  <h3>Werkwijze</h3>
  <p>Werkt met full frame &eacute;n medium format analoge camera&rsquo;s, met diverse filmgevoeligheden voor veelzijdige sfeer en stijl.</p>
  <h3>Archiefstructuur</h3>
  <p>Beelden en shoots worden gesorteerd op cameratype en filmtype, ideaal voor een dynamisch portfolio.</p>
</section>

<section id="apparatuur">
  <h2>Apparatuur</h2>
  <div class="columns">
    <div>
      <h3>Full Frame 35mm</h3>
      <ul>
        <li>Canon A1 &ndash; handmatige bediening, creatieve controle</li>
        <li>Olympus AF-1 Twin (Ben) &ndash; point-and-shoot met dual focal length</li>
        <li>Ricoh FF-9 &ndash; compact, scherp, ideaal voor straatfotografie</li>
        <li>Ricoh TF-500 &ndash; allround compactcamera</li>
      </ul>
    </div>
    <div>
      <h3>Medium Format</h3>
      <ul>
        <li>Mamiya 645 (6x4.5) &ndash; hoge resolutie, ideaal voor portretten/landschappen</li>
        <li>Yashica D (6x6) &ndash; twin-lens reflex, klassieke look met vierkante composities</li>
      </ul>
    </div>
  </div>
</section>

<section id="filmvoorraad">
  <h2>Filmvoorraad</h2>
  <div class="columns">
    <div class="card"><h3>ISO 0&ndash;200</h3><ul><li>Kodak Ektar 100 &ndash; levendige kleuren, fijne korrel</li><li>Kodak Portra 160 &ndash; zachte huidtinten, breed bereik</li></ul></div>
    <div class="card"><h3>ISO 400&ndash;600</h3><ul><li>Kodak Portra 400 &ndash; allrounder, warm en consistent</li></ul></div>
    <div class="card"><h3>ISO 800&ndash;1000</h3><ul><li>Cinestill 800T &ndash; uniek blauw/teal tint, halation effect</li><li>Kodak Portra 800 &ndash; warme tonen, goed bij weinig licht</li></ul></div>
  </div>
</section>

<section id="contact" class="contact">
  <h2>Neem contact op</h2>
  <p>Klaar om samen iets moois te maken? Laten we je project bespreken.</p>
  <div class="actions">
    <a class="button" href="mailto:{{ contact_email }}">{{ contact_email }}</a>
    <a class="button ghost" href="tel:{{ contact_phone|replace(' ', '') }}">{{ contact_phone }}</a>
  </div>
</section>
</main>

<div class="overlay" id="booking" hidden>
  <div class="booking">
    <h3>Boek een sessie</h3>
    <p>Vul het formulier in en ik neem binnen 24 uur contact met je op.</p>
    <form action="mailto:{{ contact_email }}" method="post" enctype="text/plain">
      <input type="text" name="naam" placeholder="Naam" required>
      <input type="email" name="email" placeholder="E-mailadres" required>
      <select name="dienst">
        <option value="">Kies een dienst</option>
        {% for value, label in booking_services %}<option value="{{ value }}">{{ label }}</option>{% endfor %}
      </select>
      <textarea name="bericht" rows="4" placeholder="Vertel iets over je project..."></textarea>
      <button type="submit">Verstuur</button>
      <button type="button" class="ghost button" data-close-booking>Annuleer</button>
    </form>
  </div>
</div>

<div class="overlay lightbox" id="lightbox" hidden>
  <div class="info"><strong>Analog Photography</strong><br><span class="counter"></span></div>
  <button type="button" class="close" aria-label="Sluiten">&times;</button>
  <button type="button" class="prev" aria-label="Vorige">&larr;</button>
  <img alt="">
  <button type="button" class="next" aria-label="Volgende">&rarr;</button>
</div>

<footer>&copy; {{ year }} {{ photographer }} Photography. Alle rechten voorbehouden.</footer>
<script type="application/json" id="portfolio-data">{{ portfolio_data|tojson }}</script>
<script src="/assets/portfolio.js"></script>
</body>
</html>
""")

PHOTO_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="nl">
<head>
""" + BASE_HEAD + """\
<title>{{ photographer }} Photography - Photo {{ photo.id + 1 }}</title>
<meta name="description" content="Analog photography by {{ photographer }}">
<meta property="og:image" content="{{ src }}">
<meta name="twitter:image" content="{{ src }}">
</head>
<body>
<main class="photo-page">
<div class="nav">
  <a href="/">&times; sluiten</a>
  {% if prev_id is not none %}<a href="/p/{{ prev_id }}/" rel="prev">&larr; vorige</a>{% endif %}
  {% if next_id is not none %}<a href="/p/{{ next_id }}/" rel="next">volgende &rarr;</a>{% endif %}
  <span>{{ counter }}</span>
</div>
<div class="media">
  <img src="{{ src }}" alt="{{ photo.caption or 'Analog photography portfolio' }}"{% if photo.blur_data_url %} style="background-image: url('{{ photo.blur_data_url }}')"{% endif %}>
</div>
<div class="meta">
  {% if photo.caption %}<h1>{{ photo.caption }}</h1>{% endif %}
  {% if photo.camera %}{{ photo.camera }}{% endif %}{% if photo.film %} &middot; {{ photo.film }}{% endif %}{% if photo.settings %} &middot; {{ photo.settings }}{% endif %}
</div>
</main>
<script>
document.addEventListener('keydown', function(e) {
  var action = {{ keys|tojson }}[e.key];
  var target = action === 'close' ? '/' :
    document.querySelector('.nav a[rel="' + (action === 'next' ? 'next' : 'prev') + '"]');
  if (!action || !target) return;
  location.href = typeof target === 'string' ? target : target.href;
});
</script>
</body>
</html>
""")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def grid_height(width: int, height: int) -> int:
    if not width:
        return 480
    return round(config.GRID_WIDTH * height / width)


def render_index(images, cloud_name: str, year: int) -> str:
    options = facet_options(images)
    rows = []
    for img in images:
        rows.append({
            "id": img.id,
            "tags": img.tags,
            "caption": img.caption,
            "blur_data_url": img.blur_data_url,
            "src": grid_url(cloud_name, img),
            "grid_height": grid_height(img.width, img.height),
        })
    portfolio_data = {
        "keys": KEY_BINDINGS,
        "images": [
            {"id": img.id, "src": detail_url(cloud_name, img), "blur": img.blur_data_url, "caption": img.caption}
            for img in images
        ],
    }
    return INDEX_TEMPLATE.render(
        images=rows,
        facets=options.items(),
        facet_labels=FACET_LABELS,
        grid_width=config.GRID_WIDTH,
        portfolio_data=portfolio_data,
        site_title=config.SITE_TITLE,
        site_description=config.SITE_DESCRIPTION,
        photographer=config.PHOTOGRAPHER,
        contact_email=config.CONTACT_EMAIL,
        contact_phone=config.CONTACT_PHONE,
        booking_services=config.BOOKING_SERVICES,
        year=year,
    )


def render_photo(photo, count: int, cloud_name: str) -> str:
    box = Lightbox(count)
    box.open(photo.id)
    return PHOTO_TEMPLATE.render(
        photo=photo,
        src=detail_url(cloud_name, photo),
        prev_id=photo.id - 1 if box.can_previous else None,
        next_id=photo.id + 1 if box.can_next else None,
        counter=box.counter_label(),
        keys=KEY_BINDINGS,
        photographer=config.PHOTOGRAPHER,
    )


def write_assets(site_dir: Path):
    assets_dir = site_dir / "assets"
    assets_dir.mkdir(parents=True, exist_ok=True)
    (assets_dir / "style.css").write_text(SHARED_CSS)
    (assets_dir / "portfolio.js").write_text(PORTFOLIO_JS)
    print("  Wrote assets/style.css, assets/portfolio.js")


def memoize_placeholders(make_placeholder):
    """Reuse one placeholder per public_id for the length of a build."""
    seen: dict[str, asyncio.Task] = {}

    async def cached(image):
        task = seen.get(image.public_id)
        if task is None or task.cancelled():
            task = seen[image.public_id] = asyncio.ensure_future(make_placeholder(image))
        return await task

    return cached


async def build_site(settings: config.Settings, http: httpx.AsyncClient, year: int) -> dict:
    """Run the build steps and return counts of what was written."""
    site_dir = settings.site_dir
    site_dir.mkdir(parents=True, exist_ok=True)
    cloud_name = settings.cloud_name or ""

    client = MediaClient(settings, http)
    cache = ListingCache(client.search_folder)
    make_placeholder = memoize_placeholders(lambda img: fetch_placeholder(http, cloud_name, img))
    assembler = PageAssembler(settings, cache, make_placeholder)

    print("Step 1: Fetching listing and blur placeholders...")
    images = await assembler.home_images()
    print(f"  Loaded {len(images)} images")
    for facet, options in facet_options(images).items():
        print(f"  {len(options)} {facet} options")

    print("Step 2: Writing assets...")
    write_assets(site_dir)

    print("Step 3: Generating index...")
    (site_dir / "index.html").write_text(render_index(images, cloud_name, year))
    print(f"  Wrote index.html ({len(images)} photos)")

    print("Step 4: Generating photo pages...")
    paths = await assembler.photo_paths()
    written = 0
    for photo_id in paths:
        try:
            photo = await assembler.photo_page(photo_id)
        except PhotoNotFound as exc:
            print(f"  {exc}, skipping")
            continue
        out_dir = site_dir / "p" / str(photo.id)
        out_dir.mkdir(parents=True, exist_ok=True)
        (out_dir / "index.html").write_text(render_photo(photo, len(paths), cloud_name))
        written += 1
    print(f"  Wrote {written} photo pages")

    options = dict(facet_options(images).items())
    (site_dir / "facets.json").write_text(json.dumps(options, indent=2))
    return {"images": len(images), "photo_pages": written, "facets": {k: len(v) for k, v in options.items()}}


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main():
    settings = config.load_settings()
    setup_logging(settings.log_level)

    async def run():
        async with httpx.AsyncClient(timeout=30) as http:
            return await build_site(settings, http, date.today().year)

    asyncio.run(run())

    print(f"\nDone! Site written to {settings.site_dir}/")
    print(f"Run: python3 -m http.server -d {settings.site_dir} 8000")


if __name__ == "__main__":
    main()
