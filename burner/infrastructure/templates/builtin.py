"""Default scripts for the built-in templates.

Written into the templates directory only when missing, so users can
edit them freely. Scripts read their inputs from BURNER_NAME, BURNER_PATH
and BURNER_DATED_NAME and run with the new project as working directory.
"""

POSIX_EXTENSION = ".sh"
WINDOWS_EXTENSION = ".ps1"

_DOTNET_SH = """\
#!/bin/bash
# Burner built-in template: .NET Console Application
set -e
cd "$BURNER_PATH"
dotnet new console -n "$BURNER_NAME" -o . --force
"""

_DOTNET_PS1 = """\
#!/usr/bin/env pwsh
# Burner built-in template: .NET Console Application
$ErrorActionPreference = "Stop"
Push-Location $env:BURNER_PATH
try {
    dotnet new console -n $env:BURNER_NAME -o . --force
    if ($LASTEXITCODE -ne 0) { exit 1 }
}
finally { Pop-Location }
"""

_WEB_SH = """\
#!/bin/bash
# Burner built-in template: HTML + JS + CSS Web App
set -e

cat > "$BURNER_PATH/index.html" << EOF
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$BURNER_NAME</title>
    <link rel="stylesheet" href="styles.css">
</head>
<body>
    <h1>$BURNER_NAME</h1>
    <p>Your web experiment starts here!</p>
    <script src="script.js"></script>
</body>
</html>
EOF

cat > "$BURNER_PATH/styles.css" << 'EOF'
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
    font-family: system-ui, -apple-system, sans-serif;
    line-height: 1.6;
    padding: 2rem;
    max-width: 800px;
    margin: 0 auto;
    background: #1a1a2e;
    color: #eee;
}
h1 { color: #ff6b35; margin-bottom: 1rem; }
p { color: #aaa; }
EOF

cat > "$BURNER_PATH/script.js" << EOF
console.log('$BURNER_NAME loaded!');
document.addEventListener('DOMContentLoaded', () => console.log('DOM ready'));
EOF
"""

_WEB_PS1 = """\
#!/usr/bin/env pwsh
# Burner built-in template: HTML + JS + CSS Web App
$ErrorActionPreference = "Stop"
$ProjectName = $env:BURNER_NAME
$TargetDirectory = $env:BURNER_PATH

$indexHtml = @"
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$ProjectName</title>
    <link rel="stylesheet" href="styles.css">
</head>
<body>
    <h1>$ProjectName</h1>
    <p>Your web experiment starts here!</p>
    <script src="script.js"></script>
</body>
</html>
"@

$stylesCss = @"
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
    font-family: system-ui, -apple-system, sans-serif;
    line-height: 1.6;
    padding: 2rem;
    max-width: 800px;
    margin: 0 auto;
    background: #1a1a2e;
    color: #eee;
}
h1 { color: #ff6b35; margin-bottom: 1rem; }
p { color: #aaa; }
"@

$scriptJs = @"
console.log('$ProjectName loaded!');
document.addEventListener('DOMContentLoaded', () => console.log('DOM ready'));
"@

Set-Content -Path (Join-Path $TargetDirectory "index.html") -Value $indexHtml
Set-Content -Path (Join-Path $TargetDirectory "styles.css") -Value $stylesCss
Set-Content -Path (Join-Path $TargetDirectory "script.js") -Value $scriptJs
"""

_SCRIPTS = {
    ("dotnet", POSIX_EXTENSION): _DOTNET_SH,
    ("dotnet", WINDOWS_EXTENSION): _DOTNET_PS1,
    ("web", POSIX_EXTENSION): _WEB_SH,
    ("web", WINDOWS_EXTENSION): _WEB_PS1,
}


def builtin_extension(windows: bool) -> str:
    """Script extension used for built-ins on the given platform family."""
    return WINDOWS_EXTENSION if windows else POSIX_EXTENSION


def builtin_script(name: str, windows: bool) -> str:
    """Return the default script body for a built-in template.

    Raises:
        KeyError: If `name` is not a built-in template.
    """
    return _SCRIPTS[(name, builtin_extension(windows))]
