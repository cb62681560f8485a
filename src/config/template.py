# Dashboard template
DASHBOARD_TEMPLATE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Dev Toolbox</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: #f4f6fb;
            min-height: 100vh;
            color: #2d3748;
        }
        .header {
            text-align: center;
            padding: 40px 20px 20px;
        }
        .header h1 {
            font-size: 2.6em;
            font-weight: 300;
        }
        .header p {
            color: #718096;
            margin-top: 8px;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            padding: 0 20px;
        }
        .search-box {
            width: 100%;
            max-width: 500px;
            margin: 20px auto 30px;
            display: block;
            padding: 12px 20px;
            font-size: 16px;
            border: 1px solid #cbd5e0;
            border-radius: 50px;
            outline: none;
        }
        .category h2 {
            font-size: 1.2em;
            font-weight: 600;
            margin: 25px 0 12px;
            color: #4a5568;
        }
        .tools-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(260px, 1fr));
            gap: 16px;
        }
        .tool-card {
            background: white;
            border-radius: 12px;
            padding: 20px;
            box-shadow: 0 4px 12px rgba(0,0,0,0.06);
            border-top: 4px solid var(--accent);
        }
        .tool-card h3 {
            font-size: 1.1em;
            margin-bottom: 8px;
        }
        .tool-card p {
            color: #718096;
            line-height: 1.5;
            margin-bottom: 10px;
        }
        .tool-card code {
            font-size: 0.85em;
            color: #4a5568;
            background: #edf2f7;
            padding: 2px 6px;
            border-radius: 4px;
        }
        .blue { --accent: #3b82f6; }
        .purple { --accent: #8b5cf6; }
        .emerald { --accent: #10b981; }
        .red { --accent: #ef4444; }
        .indigo { --accent: #6366f1; }
        .green { --accent: #22c55e; }
        .orange { --accent: #f97316; }
        .pink { --accent: #ec4899; }
        .yellow { --accent: #eab308; }
        .no-results {
            text-align: center;
            padding: 40px;
            display: none;
        }
        .footer {
            text-align: center;
            padding: 40px 20px;
            color: #a0aec0;
            font-size: 0.9em;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>Dev Toolbox</h1>
        <p>Developer utilities: format, encode, generate, test</p>
    </div>
    <div class="container">
        <input type="text" class="search-box" placeholder="Search tools..." id="searchInput">
        {% for category, items in categories %}
        <div class="category">
            <h2>{{ category }}</h2>
            <div class="tools-grid">
                {% for tool in items %}
                <div class="tool-card {{ tool.color }}" data-search="{{ (tool.name ~ ' ' ~ tool.description ~ ' ' ~ tool.category)|lower }}">
                    <h3>{{ tool.name }}</h3>
                    <p>{{ tool.description }}</p>
                    <code>{{ tool.endpoint }}</code>
                </div>
                {% endfor %}
            </div>
        </div>
        {% endfor %}
        <div class="no-results" id="noResults">
            <h3>No tools found</h3>
            <p>Try adjusting your search terms</p>
        </div>
    </div>
    <div class="footer">
        <p>Dev Toolbox | Built with Flask</p>
    </div>
    <script>
        document.getElementById('searchInput').addEventListener('input', function(e) {
            const term = e.target.value.toLowerCase();
            let visible = 0;
            document.querySelectorAll('.category').forEach(section => {
                let shown = 0;
                section.querySelectorAll('.tool-card').forEach(card => {
                    const match = card.dataset.search.includes(term);
                    card.style.display = match ? 'block' : 'none';
                    if (match) shown++;
                });
                section.style.display = shown ? 'block' : 'none';
                visible += shown;
            });
            document.getElementById('noResults').style.display = visible === 0 ? 'block' : 'none';
        });
    </script>
</body>
</html>
'''
