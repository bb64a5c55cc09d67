"""Lightweight MJPEG debug stream of the rendered eye field, plus stats and reset."""

import io
import json
import time
import threading
from dataclasses import asdict
from http.server import HTTPServer, BaseHTTPRequestHandler
from socketserver import ThreadingMixIn

from PIL import Image


class ThreadingHTTPServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True


class DebugState:
    """Shared state between the main loop and the debug server.

    The server never touches the simulation: it reads the last published
    frame/stats and queues reset requests for the main loop to apply.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.frame = None       # Latest rendered frame (PIL Image copy)
        self.stats = {}         # Latest simulation snapshot as a dict
        self.fps_render = 0.0
        self._reset_requested = False

    def update_frame(self, image: Image.Image):
        with self.lock:
            self.frame = image.copy()

    def update_stats(self, snapshot, fps_render: float):
        with self.lock:
            self.stats = asdict(snapshot)
            self.fps_render = fps_render

    def get_stats(self) -> dict:
        with self.lock:
            return dict(self.stats, fps_render=round(self.fps_render, 1))

    def request_reset(self):
        with self.lock:
            self._reset_requested = True

    def take_reset_request(self) -> bool:
        """Return True once per queued reset request."""
        with self.lock:
            requested = self._reset_requested
            self._reset_requested = False
            return requested

    def get_jpeg(self) -> bytes | None:
        with self.lock:
            if self.frame is None:
                return None
            frame = self.frame

        buf = io.BytesIO()
        frame.save(buf, format="JPEG", quality=70)
        return buf.getvalue()


_INDEX_HTML = b"""\
<html><head><title>Eye Grid Debug</title>
<style>
body { background:#111; color:#0f0; font-family:monospace; text-align:center; margin:0; padding:20px; }
img.stream { border:2px solid #0f0; margin-top:10px; max-width:95%; }
button { background:#1a1a1a; color:#0f0; border:2px solid #0f0; padding:8px 20px; cursor:pointer; }
#stats { margin-top: 10px; white-space: pre; }
</style></head>
<body>
<h2>Eye Grid - Debug</h2>
<img class="stream" src="/stream" /><br>
<button onclick="fetch('/api/reset', {method: 'POST'})">Regenerate field</button>
<div id="stats"></div>
<script>
function loadStats() {
    fetch('/api/stats')
        .then(r => r.json())
        .then(s => { document.getElementById('stats').textContent = JSON.stringify(s, null, 2); })
        .catch(() => {});
}
setInterval(loadStats, 1000);
loadStats();
</script>
</body></html>
"""


class DebugHandler(BaseHTTPRequestHandler):
    debug_state = None  # Set before starting server

    def do_GET(self):
        if self.path == "/":
            self._send_html(_INDEX_HTML)
        elif self.path == "/stream":
            self._send_stream()
        elif self.path == "/api/stats":
            self._send_json(self.debug_state.get_stats())
        else:
            self.send_response(404)
            self.end_headers()

    def do_POST(self):
        if self.path == "/api/reset":
            self.debug_state.request_reset()
            self._send_json({"ok": True})
        else:
            self.send_response(404)
            self.end_headers()

    def _send_html(self, content: bytes):
        self.send_response(200)
        self.send_header("Content-Type", "text/html")
        self.end_headers()
        self.wfile.write(content)

    def _send_json(self, data, status=200):
        body = json.dumps(data).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _send_stream(self):
        self.send_response(200)
        self.send_header("Content-Type",
                         "multipart/x-mixed-replace; boundary=frame")
        self.end_headers()
        try:
            while True:
                jpeg = self.debug_state.get_jpeg()
                if jpeg is not None:
                    self.wfile.write(b"--frame\r\n")
                    self.wfile.write(b"Content-Type: image/jpeg\r\n")
                    self.wfile.write(f"Content-Length: {len(jpeg)}\r\n".encode())
                    self.wfile.write(b"\r\n")
                    self.wfile.write(jpeg)
                    self.wfile.write(b"\r\n")
                time.sleep(0.1)  # ~10 FPS for the debug stream
        except (BrokenPipeError, ConnectionResetError):
            pass

    def log_message(self, format, *args):
        pass  # Suppress request logging


def start_debug_server(debug_state: DebugState, port: int = 8080):
    """Start the debug web server in a daemon thread."""
    DebugHandler.debug_state = debug_state
    server = ThreadingHTTPServer(("0.0.0.0", port), DebugHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server
