INDEX_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>SnapCaption</title>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-50 min-h-screen flex items-center justify-center p-6">
    <div class="w-full max-w-lg bg-white rounded-xl shadow p-6 space-y-4">
        <h1 class="text-xl font-semibold">📸 SnapCaption</h1>

        <form id="captionForm" class="space-y-3">
            <input type="password" id="apiKey" placeholder="API key" class="w-full border rounded p-2" required>
            <input type="file" name="image" accept="image/*" class="w-full" required>
            <textarea name="description" placeholder="What's happening in this photo?" class="w-full border rounded p-2"></textarea>
            <input type="text" name="place_name" placeholder="Place or attraction (optional)" class="w-full border rounded p-2">
            <select name="rating" class="w-full border rounded p-2">
                <option value="">No rating</option>
                <option value="5">★★★★★</option>
                <option value="4">★★★★</option>
                <option value="3">★★★</option>
                <option value="2">★★</option>
                <option value="1">★</option>
            </select>
            <div id="styles" class="flex flex-wrap gap-2 text-sm"></div>
            <button type="submit" class="w-full bg-indigo-600 text-white rounded p-2 font-semibold">Generate</button>
        </form>

        <div id="error" class="hidden bg-red-100 text-red-800 rounded p-3 text-sm"></div>
        <div id="results" class="space-y-3"></div>
    </div>

    <script>
        (async function () {
            const res  = await fetch('/api/styles');
            const data = await res.json();
            const box  = document.getElementById('styles');
            data.styles.forEach(function (s) {
                const checked = data.default.includes(s.key) ? 'checked' : '';
                box.insertAdjacentHTML('beforeend',
                    '<label class="border rounded px-2 py-1"><input type="checkbox" name="styles" value="'
                    + s.key + '" ' + checked + '> ' + s.emoji + ' ' + s.label + '</label>');
            });
        })();

        document.getElementById('captionForm').addEventListener('submit', async function (e) {
            e.preventDefault();
            const errorBox = document.getElementById('error');
            const results  = document.getElementById('results');
            errorBox.classList.add('hidden');
            results.innerHTML = '<p class="text-gray-400 italic">Generating...</p>';

            const res = await fetch('/api/caption', {
                method: 'POST',
                headers: { 'x-api-key': document.getElementById('apiKey').value },
                body: new FormData(e.target),
            });
            const data = await res.json();
            results.innerHTML = '';
            if (!res.ok) {
                errorBox.textContent = data.error || 'Something went wrong';
                errorBox.classList.remove('hidden');
                return;
            }
            data.captions.forEach(function (c) {
                const card = document.createElement('div');
                card.className = 'border rounded p-3';
                card.innerHTML = '<div class="text-xs text-gray-500 mb-1"></div><p></p>';
                card.querySelector('div').textContent = c.style;
                card.querySelector('p').textContent = c.content;
                results.appendChild(card);
            });
        });
    </script>
</body>
</html>
"""
