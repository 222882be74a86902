"""Load test using Locust: browsing users with occasional bulk selections.

Run with:
    locust -f tests/load/locustfile.py --host http://localhost:8000 \
           --users 100 --spawn-rate 10 --run-time 60s --headless
"""

from __future__ import annotations

import random
import uuid

from locust import HttpUser, between, task


class CatalogBrowsingUser(HttpUser):
    """Simulates one person paging through the catalog and ticking rows."""

    wait_time = between(0.5, 2.0)

    def on_start(self) -> None:
        self.client.headers["X-Session-ID"] = uuid.uuid4().hex
        self.page = 1

    def on_stop(self) -> None:
        self.client.delete("/api/v1/sessions/current", name="/api/v1/sessions/current")

    @task(2)
    def health_check(self) -> None:
        self.client.get("/health", name="/health")

    @task(6)
    def browse_page(self) -> None:
        self.page = max(1, self.page + random.choice((-1, 1, 1)))
        self.client.get(
            f"/api/v1/artworks?page={self.page}&page_size=12",
            name="/api/v1/artworks",
        )

    @task(3)
    def toggle_rows(self) -> None:
        resp = self.client.get("/api/v1/artworks/current", name="/api/v1/artworks/current")
        if resp.status_code != 200:
            return
        ids = [item["id"] for item in resp.json().get("items", [])]
        chosen = random.sample(ids, k=min(len(ids), random.randint(0, 4)))
        self.client.put(
            "/api/v1/selection/page",
            json={"selected_ids": chosen},
            name="/api/v1/selection/page",
        )

    @task(1)
    def bulk_select(self) -> None:
        self.client.post(
            "/api/v1/selection/bulk",
            json={"count": random.randint(1, 60)},
            name="/api/v1/selection/bulk",
        )

    @task(1)
    def read_selection(self) -> None:
        self.client.get("/api/v1/selection", name="/api/v1/selection")
