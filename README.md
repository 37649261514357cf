# wpplugingen

`wpplugingen` is a command-line tool that starts a WordPress plugin project. It takes a
Composer-style project name and works out the plugin's names from it. It then creates
the plugin's directory tree and writes a `composer.json` with PSR-4 autoloading. Last,
it runs `composer install` in the export directory.

## Installation

```
pip install .
```

The `generate` command runs `composer install`, so `composer` must be on your `PATH`.

## Usage

```
wp-plugin-generator generate my-company/my-wordpress-plugin
```

The project name must have the form `company/plugin-name`. You can write each part in
kebab-case (`my-wordpress-plugin`) or CamelCase (`MyWordpressPlugin`). The name must not
contain `.`, `'` or `,`.

By default the output goes to the current directory. Use `--export-dir` to choose
another directory. You can give the option before or after the sub-command:

```
wp-plugin-generator --export-dir ./my-plugin generate my-company/my-wordpress-plugin
wp-plugin-generator generate my-company/my-wordpress-plugin --export-dir ./my-plugin
```

To print the version:

```
wp-plugin-generator version
```

If `generate` fails, the tool prints `Error generating plugin: ...` to standard error
and exits with status 1. This happens for an invalid project name, a file system error
or a failed `composer install`.

### What `generate` creates

Below the export directory, `generate` creates these directories:

`includes`, `public`, `public/css`, `public/js`, `admin`, `admin/css`, `admin/js`,
`api`, `languages` and `vendor`.

It also writes `composer.json`. In that file:

- the package name is the project name in lower-case kebab-case, for example `my-company/my-wordpress-plugin`;
- the type is `project`;
- the `authors` list is empty;
- the namespace maps to `includes/`;
- the `Public`, `Admin` and `API` sub-namespaces map to `public/`, `admin/` and `api/`;
- `php-stubs/wordpress-stubs` `^6.8` is a development dependency.

### Derived names

From `my-company/my-wordpress-plugin`, the tool derives these names:

| Value              | Result                        |
|--------------------|-------------------------------|
| Plugin name        | `My Wordpress Plugin`         |
| Slug / text domain | `my-wordpress-plugin`         |
| Class prefix       | `MyWordpressPlugin`           |
| Namespace          | `MyCompany\MyWordpressPlugin` |
| Constant prefix    | `MY_WORDPRESS_PLUGIN`         |
| Function postfix   | `my_wordpress_plugin`         |

## What it does not do

The tool does not write the plugin's own source files. It creates no PHP classes, no
main plugin file, no CSS or JavaScript assets, no `index.php` placeholders and no
`.gitignore`. The derived names above are available as a `PluginData` value, but they
are not written into any file.

## Library use

```python
from wpplugingen.plugin_data import generate_plugin_data
from wpplugingen.composer import Author, generate_composer_json

data = generate_plugin_data("my-company/my-wordpress-plugin")
print(data.class_prefix)   # MyWordpressPlugin
print(data.namespace_name) # MyCompany\MyWordpressPlugin

print(generate_composer_json(
    "my-company/my-wordpress-plugin",
    [Author(name="Jane Doe", email="jane@example.com")],
))
```

The library provides the following functions:

- `wpplugingen.composer.write_composer_json(export_dir, project_name, authors)` writes the file and returns its path.
- `wpplugingen.generator.generate_plugin(export_dir, project_name)` does everything the `generate` command does and returns the `PluginData`.
- `wpplugingen.generator.create_directories(export_dir)` creates the directory tree.
- `wpplugingen.generator.run_composer_install(export_dir)` runs `composer install`.

A project name that is not valid raises `wpplugingen.utils.ProjectNameError`, which is a
subclass of `ValueError`. This covers a name with invalid characters, a name without a
`/` when `composer.json` is built, and an empty word when the namespace or class prefix
is built.