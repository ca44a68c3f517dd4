"""
HTTP client for the task board API.
"""

import requests

CSRF_COOKIE = "XSRF-TOKEN"
CSRF_HEADER = "X-XSRF-TOKEN"


class TaskApiError(Exception):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TaskApiClient:
    """
    Talks to a running task board over HTTP.

    Keeps one requests.Session so the session cookie and the XSRF-TOKEN
    cookie survive between calls. The token is echoed back in the
    X-XSRF-TOKEN header on every state-changing request.
    """

    def __init__(self, base_url="http://localhost:3002", session=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method, path, **kwargs):
        headers = kwargs.pop("headers", {})
        if method != "GET":
            if not self.session.cookies.get(CSRF_COOKIE):
                self.current_user()
            headers[CSRF_HEADER] = self.session.cookies.get(CSRF_COOKIE, "")
        response = self.session.request(
            method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs
        )
        if response.status_code >= 400:
            try:
                message = response.json().get("message", response.reason)
            except ValueError:
                message = response.reason
            raise TaskApiError(message, response.status_code)
        if response.status_code == 204:
            return None
        return response.json()

    # --- Auth ---

    def sign_in(self, username):
        return self._request("POST", "/api/signIn", json={"username": username})

    def sign_out(self):
        return self._request("POST", "/api/signOut", json={})

    def current_user(self):
        return self._request("GET", "/api/currentUser")

    # --- Tasks ---

    def find_tasks(self, completed=None, limit=None, order_by=None):
        params = {}
        if completed is not None:
            params["completed"] = "true" if completed else "false"
        if limit is not None:
            params["_limit"] = limit
        if order_by:
            params["_sort"] = ",".join(order_by)
            params["_order"] = ",".join(order_by.values())
        return self._request("GET", "/api/tasks", params=params)

    def count_tasks(self, completed=None):
        params = {"__action": "count"}
        if completed is not None:
            params["completed"] = "true" if completed else "false"
        return self._request("GET", "/api/tasks", params=params)["count"]

    def save_task(self, task):
        body = {key: task[key] for key in ("title", "completed") if key in task}
        if task.get("id") is None:
            return self._request("POST", "/api/tasks", json=body)
        return self._request("PUT", f"/api/tasks/{task['id']}", json=body)

    def delete_task(self, task_id):
        return self._request("DELETE", f"/api/tasks/{task_id}")

    def set_all(self, completed):
        return self._request("POST", "/api/TasksController/setAll", json={"completed": completed})
