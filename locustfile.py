"""
Locust Load Testing File for the Email Address API

Run with:
    locust -f locustfile.py --host=http://localhost:5000

Then open http://localhost:8089 in your browser to control the test.
"""

import random
from locust import HttpUser, task, between, events


VALID_EMAILS = [
    "user@example.com",
    "john.doe@company.org",
    "david+tag@proton.me",
    "eve@subdomain.example.co.uk",
    '"frank jones"@my-domain.io',
    "grace@[192.168.0.1]",
    "henry@[IPv6:2001:db8::1]",
    "iris@localhost",
]

INVALID_EMAILS = [
    "plainaddress",
    "@missing-local.com",
    "missing-domain@",
    "user@.com",
    "user@@double-at.com",
    "user@domain..com",
    ".user@domain.com",
    "user.@domain.com",
    "user space@domain.com",
    "user..name@domain.com",
    "user@1.2.3.999",
    "a" * 65 + "@example.com",
]

MIXED_EMAILS = VALID_EMAILS + INVALID_EMAILS


class EmailAddressUser(HttpUser):
    """Simulates a typical client of the API."""

    wait_time = between(0.5, 2)

    @task(10)
    def parse_valid_email(self):
        self.client.post("/parse", json={"email": random.choice(VALID_EMAILS)}, name="/parse [valid]")

    @task(3)
    def parse_invalid_email(self):
        self.client.post("/parse", json={"email": random.choice(INVALID_EMAILS)}, name="/parse [invalid]")

    @task(5)
    def try_parse(self):
        self.client.get("/try-parse", params={"email": random.choice(MIXED_EMAILS)}, name="/try-parse")

    @task(1)
    def parse_batch(self):
        emails = random.sample(MIXED_EMAILS, random.randint(5, 10))
        self.client.post("/parse/batch", json={"emails": emails}, name="/parse/batch")

    @task(1)
    def health_check(self):
        self.client.get("/health", name="/health")


class StressTestUser(HttpUser):
    """Minimal wait time, used to find maximum throughput."""

    wait_time = between(0.01, 0.1)

    @task
    def rapid_parse(self):
        self.client.post("/parse", json={"email": random.choice(MIXED_EMAILS)})


@events.request.add_listener
def on_request(request_type, name, response_time, response_length, exception, **kwargs):
    """Log failed and slow requests."""
    if exception:
        print(f"Request failed: {name} - {exception}")
    elif response_time > 1000:
        print(f"Slow request: {name} took {response_time:.2f}ms")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """Print summary statistics."""
    stats = environment.stats
    print(f"\nTotal Requests: {stats.total.num_requests}")
    print(f"Total Failures: {stats.total.num_failures}")
    print(f"Average Response Time: {stats.total.avg_response_time:.2f}ms")
    print(f"95th Percentile: {stats.total.get_response_time_percentile(0.95):.2f}ms")
    print(f"Requests/sec: {stats.total.total_rps:.2f}")
