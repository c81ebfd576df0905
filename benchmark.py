#!/usr/bin/env python3
"""
Performance Benchmark for the email parser

Measures parses per second for the strict and lenient entry points.
"""

import time
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from email_address import EmailAddressError, HostAddressError, parse_email, try_parse_email

VALID_EMAILS = [
    "user@example.com",
    "john.doe@company.org",
    '"quoted user"@example.com',
    "user@[192.168.0.1]",
    "user@[IPv6:2001:db8::1]",
]

INVALID_EMAILS = [
    "plainaddress",
    "@missing-local.com",
    "user@",
    "us..er@domain.com",
    "user@.com",
]

ALL_EMAILS = VALID_EMAILS + INVALID_EMAILS


def strict(email):
    try:
        parse_email(email)
    except (EmailAddressError, HostAddressError):
        pass


def benchmark(parse, emails, iterations=10000):
    """Run benchmark and return statistics."""
    start_time = time.perf_counter()

    for _ in range(iterations):
        for email in emails:
            parse(email)

    total_time = time.perf_counter() - start_time
    total_requests = iterations * len(emails)

    return {
        'total_time': total_time,
        'total_requests': total_requests,
        'rps': total_requests / total_time,
        'avg_time_ms': (total_time / total_requests) * 1000
    }


def report(title, result):
    print(f"\n[{title}]")
    print(f"  Total time: {result['total_time']:.3f}s")
    print(f"  Total parses: {result['total_requests']}")
    print(f"  Rate: {result['rps']:,.0f} parses/second")
    print(f"  Avg time: {result['avg_time_ms']:.4f}ms")


def main():
    print("=" * 60)
    print("Email Parser Performance Benchmark")
    print("=" * 60)

    # Warmup
    benchmark(try_parse_email, ALL_EMAILS, iterations=1000)

    report("Strict, valid emails", benchmark(strict, VALID_EMAILS))
    report("Strict, invalid emails", benchmark(strict, INVALID_EMAILS))
    report("Lenient, valid emails", benchmark(try_parse_email, VALID_EMAILS))
    report("Lenient, invalid emails", benchmark(try_parse_email, INVALID_EMAILS))
    report("Lenient, mixed emails", benchmark(try_parse_email, ALL_EMAILS))

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
