# multilanggen

Builds one HTML page for each language from a single Jinja2 template and a set
of JSON language files.

## Installation

```
pip install .
```

This installs the `multilang-gen` command. Running it with no command prints
the help text.

## Starting a project

```
multilang-gen init ./my-project
```

This writes a sample project to the target directory, which defaults to the
current one. Existing files with the same names are overwritten.

```
my-project/
├── manifest.json        # site settings: baseURL, siteName, author, description, version
└── langs/
    ├── index.json       # list of languages: code, name, displayName, file
    ├── zh-CN.json       # strings for "zh"
    └── en-US.json       # strings for "en"
```

`init` does not write a template. Add an `index.tmpl` to the project root
before you generate anything.

## Generating pages

```
multilang-gen gen ./my-project
multilang-gen gen . --output "page-{lang}.html"
multilang-gen gen . --lang zh
multilang-gen gen . --lang zh,en
multilang-gen gen . -l zh -l en
```

The directory defaults to the current one. It must contain `index.tmpl` and
`langs/index.json`. Pages are written to `outputs/` inside the project, which
is created if needed.

- `--output` / `-o` sets the file name pattern; every `{lang}` is replaced by
  the language code. The default is `{lang}.html`.
- `--lang` / `-l` limits generation to the given codes. Values may be
  comma-separated and the option may be repeated. If a code is not in
  `langs/index.json`, the command stops with an error. The links between
  languages then include only the selected languages.

Each language entry's `file` names its data file inside `langs/`; only `.json`
files are accepted, and their top level must be an object.

`manifest.json` is optional. When it is missing or cannot be read, a warning is
printed and these defaults are used: `site_name` "Website", `version` "1.0.0",
all other fields empty.

On failure the command prints `Error: ...` to standard error and exits with
status 1.

## Template variables

The template is rendered by Jinja2 with HTML auto-escaping. It receives:

| Name         | Contents                                                                         |
|--------------|----------------------------------------------------------------------------------|
| `lang`       | The current language: `code`, `name`, `display_name`, `file`, `url`, `current`    |
| `lang_links` | Every generated language with the same fields; `current` marks the page's own     |
| `i18n`       | The language's JSON data                                                         |
| `i18n_json`  | The same data as compact JSON with sorted keys; `<`, `>` and `&` are written as `\u003c`, `\u003e`, `\u0026` |
| `base`       | The manifest: `base_url`, `site_name`, `author`, `description`, `version`        |

`url` is the output file name for that language. Because auto-escaping is on,
insert `i18n_json` into a script with the `safe` filter.

Example:

```html
<html lang="{{ lang.code }}">
<head><title>{{ i18n.title }} – {{ base.site_name }}</title></head>
<body>
  <nav>
  {% for link in lang_links %}
    <a href="{{ link.url }}"{% if link.current %} class="active"{% endif %}>{{ link.display_name }}</a>
  {% endfor %}
  </nav>
  <h1>{{ i18n.welcome }}</h1>
  <script>const I18N = {{ i18n_json|safe }};</script>
</body>
</html>
```

## Using it from Python

```python
from multilanggen.generate import generate
from multilanggen.init_project import init_project

init_project("site")
# write site/index.tmpl, then:
paths = generate("site", "{lang}.html", ["en"])
```

`init_project` and `generate` return the paths of the files they wrote.
`generate` raises `multilanggen.generate.GenerationError` when generation
fails. The lower-level pieces are also available: `parse_template`,
`filter_languages`, `language_links`, `render_language_file` and `output_name`
in `multilanggen.generate`, and `Language`, `Manifest`, `load_manifest`,
`load_language_index`, `load_language_data` and `LanguageDataError` in
`multilanggen.models`.