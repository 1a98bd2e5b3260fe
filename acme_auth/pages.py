"""HTML for the landing page and the OAuth callback hand-off."""

import html
import json
from string import Template
from urllib.parse import urlencode

INDEX_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>Acme Auth</title>
  </head>
  <body>
    <h1>Acme Auth</h1>
    <div id="user"></div>
    <a id="login" href="$authorize_url">Login with GitHub</a>
    <button id="logout" hidden>Logout</button>
    <script>
      const token = window.localStorage.getItem('token');
      const login = document.getElementById('login');
      const logout = document.getElementById('logout');
      const userDiv = document.getElementById('user');
      logout.addEventListener('click', () => {
        window.localStorage.removeItem('token');
        window.document.location = '/';
      });
      if (token) {
        fetch('/api/auth', { headers: { authorization: token } })
          .then((response) => response.ok ? response.json() : Promise.reject(response))
          .then((user) => {
            userDiv.textContent = 'Welcome ' + user.username;
            login.hidden = true;
            logout.hidden = false;
          })
          .catch(() => window.localStorage.removeItem('token'));
      }
    </script>
  </body>
</html>
"""
)

CALLBACK_TEMPLATE = Template(
    """<html>
  <head>
    <script>
      window.localStorage.setItem('token', $token);
      window.document.location = '/';
    </script>
  </head>
</html>
"""
)


def render_index(client_id: str, oauth_url: str = "https://github.com") -> str:
    """Landing page with a GitHub login link for client_id."""
    query = urlencode({"client_id": client_id})
    authorize_url = f"{oauth_url.rstrip('/')}/login/oauth/authorize?{query}"
    return INDEX_TEMPLATE.substitute(authorize_url=html.escape(authorize_url))


def render_callback(token: str) -> str:
    """Page that stores the session token in localStorage and redirects home."""
    return CALLBACK_TEMPLATE.substitute(token=json.dumps(token))
