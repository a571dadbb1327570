#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
"""Live test suite for the Prompt Pipeline API.

Walks every endpoint of a running server: the stateless pipeline stages,
single and batch execution, history logging and analytics, and the
error contract (validation, auth, status codes).

Prerequisites:
  - API server running on localhost:8000
  - HISTORY_BACKEND=memory, or a migrated database for HISTORY_BACKEND=sql
  - LLM_PROVIDER_MODE=mock, or reachable provider endpoints for live mode

Usage:
  ./scripts/live-tests.py                      # full suite
  ./scripts/live-tests.py --section pipeline   # only the pipeline stages
  ./scripts/live-tests.py --base http://host:9000
"""

import argparse
import asyncio
import sys
import uuid

import httpx

BASE = "http://localhost:8000"
HEADERS = {"Origin": "http://localhost:5173"}

# ---------------------------------------------------------------------------
# Test runner
# ---------------------------------------------------------------------------

PASS = 0
FAIL = 0
ERRORS: list[str] = []
SECTION = ""


def section(name: str):
    global SECTION
    SECTION = name
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}\n")


def ok(name: str, passed: bool, detail: str = ""):
    global PASS, FAIL
    if passed:
        PASS += 1
        print(f"  PASS  {name}")
    else:
        FAIL += 1
        msg = f"[{SECTION}] {name}: {detail}" if detail else f"[{SECTION}] {name}"
        ERRORS.append(msg)
        print(f"  FAIL  {name} -- {detail}")


def has_keys(d: dict, *keys: str) -> bool:
    return all(k in d for k in keys)


# ---------------------------------------------------------------------------
# 1. Health and service info
# ---------------------------------------------------------------------------

async def test_health(c: httpx.AsyncClient):
    section("Health")

    r = await c.get("/health")
    ok("GET /health returns 200", r.status_code == 200)
    data = r.json()
    ok("status is ok", data.get("status") == "ok", f"status={data.get('status')}")
    ok("health has version and environment", has_keys(data, "version", "environment", "timestamp"))

    r = await c.get("/api")
    ok("GET /api returns 200", r.status_code == 200)
    info = r.json()
    ok("service info lists endpoints", len(info.get("endpoints", {})) >= 10)
    ok("service info lists features", "LLM Execution" in info.get("features", []))


# ---------------------------------------------------------------------------
# 2. Pipeline stages
# ---------------------------------------------------------------------------

async def test_pipeline(c: httpx.AsyncClient) -> dict:
    section("Pipeline")
    ctx: dict = {}

    r = await c.post("/api/intent/analyze",
                     json={"text": "Write a python function that merges two sorted lists"})
    ok("analyze returns 200", r.status_code == 200, f"status={r.status_code}")
    intent = r.json()
    ok("intent is code_generation",
       intent.get("intentCategory") == "code_generation",
       f"got {intent.get('intentCategory')}")
    ok("intent has tags and confidence", has_keys(intent, "tags", "confidence"))

    r = await c.post("/api/model/recommend",
                     json={"intentCategory": intent.get("intentCategory", "other")})
    ok("recommend returns 200", r.status_code == 200, f"status={r.status_code}")
    rec = r.json()
    ok("recommendation has model and provider",
       has_keys(rec, "modelName", "provider", "reasoning", "performanceScore"))

    r = await c.post("/api/model/recommend",
                     json={"intentCategory": "problem_solving", "budget": 0.004})
    ok("budget picks a cheaper model", r.json().get("modelName") == "gpt-3.5-turbo",
       f"got {r.json().get('modelName')}")

    r = await c.post("/api/model/recommend",
                     json={"intentCategory": "code_generation", "speed": "fast"})
    ok("fast speed picks gpt-4o-mini", r.json().get("modelName") == "gpt-4o-mini",
       f"got {r.json().get('modelName')}")

    r = await c.post("/api/prompt/generate", json={
        "model": rec.get("modelName", "gpt-4o"),
        "intent": intent.get("intentCategory", "other"),
        "userInput": "merge two sorted lists",
    })
    ok("generate returns 200", r.status_code == 200, f"status={r.status_code}")
    generated = r.json()
    ok("generated prompt is unoptimized",
       generated.get("rawPrompt") == generated.get("optimizedPrompt"))

    r = await c.post("/api/prompt/refine", json={
        "prompt": generated.get("rawPrompt", "x"),
        "tone": "technical",
        "complexity": "detailed",
    })
    ok("refine returns 200", r.status_code == 200, f"status={r.status_code}")
    refined = r.json()
    ok("refine reports four improvements", len(refined.get("improvements", [])) == 4,
       f"got {refined.get('improvements')}")

    r = await c.post("/api/run/llm", json={
        "model": rec.get("modelName", "gpt-4o"),
        "prompt": refined.get("optimizedPrompt", "x"),
    })
    ok("run returns 200", r.status_code == 200, f"status={r.status_code} body={r.text[:200]}")
    run = r.json()
    ok("run has output, usage and latency", has_keys(run, "output", "usage", "latency"))

    ctx.update(intent=intent, rec=rec, refined=refined, run=run)
    return ctx


# ---------------------------------------------------------------------------
# 3. Batch execution
# ---------------------------------------------------------------------------

async def test_batch(c: httpx.AsyncClient):
    section("Batch")

    payload = [
        {"model": "gpt-4o-mini", "prompt": "one"},
        {"model": "claude-3-haiku", "prompt": "two"},
        {"model": "gemini-flash", "prompt": "three"},
    ]
    r = await c.post("/api/run/batch", json=payload)
    ok("batch returns 200", r.status_code == 200, f"status={r.status_code}")
    items = r.json() if r.status_code == 200 else []
    ok("batch returns one response per request", len(items) == 3, f"got {len(items)}")
    ok("batch preserves order",
       [i.get("model") for i in items] == ["gpt-4o-mini", "claude-3-haiku", "gemini-flash"])

    r = await c.post("/api/run/batch", json=[])
    ok("empty batch returns []", r.status_code == 200 and r.json() == [])


# ---------------------------------------------------------------------------
# 4. History and analytics
# ---------------------------------------------------------------------------

async def test_history(c: httpx.AsyncClient, ctx: dict):
    section("History")
    user = {"x-user-id": f"live-{uuid.uuid4().hex[:8]}"}

    r = await c.get("/api/history", headers=user)
    ok("new user has empty history", r.status_code == 200 and r.json() == [])

    r = await c.get("/api/history/analytics", headers=user)
    ok("new user analytics are zero", r.json().get("totalInteractions") == 0)

    rec = ctx.get("rec", {})
    intent = ctx.get("intent", {})
    for _ in range(2):
        r = await c.post("/api/history/log", headers=user, json={
            "model": rec.get("modelName", "gpt-4o"),
            "prompt": ctx.get("refined", {}).get("optimizedPrompt", "p"),
            "result": ctx.get("run", {}).get("output", "r"),
            "metadata": {
                "intentCategory": intent.get("intentCategory"),
                "tags": intent.get("tags"),
                "modelProvider": rec.get("provider"),
            },
        })
        ok("log returns success", r.status_code == 200 and r.json() == {"success": True},
           f"status={r.status_code}")

    r = await c.get("/api/history?limit=1", headers=user)
    ok("limit is honored", len(r.json()) == 1, f"got {len(r.json())}")

    r = await c.get("/api/history/analytics", headers=user)
    analytics = r.json()
    ok("analytics count both logs", analytics.get("totalInteractions") == 2)
    ok("analytics has last interaction", analytics.get("lastInteraction") is not None)


# ---------------------------------------------------------------------------
# 5. Error handling
# ---------------------------------------------------------------------------

async def test_error_handling(c: httpx.AsyncClient):
    section("Error Handling")

    r = await c.post("/api/intent/analyze", json={"text": ""})
    ok("empty text returns 422", r.status_code == 422)
    ok("422 body is problem details", has_keys(r.json(), "title", "status", "detail"))

    r = await c.post("/api/run/llm", json={"model": "gpt-9", "prompt": "x"})
    ok("unknown model returns 422", r.status_code == 422)

    r = await c.post("/api/run/llm", json={"model": "gpt-4o", "prompt": "x", "temperature": 3})
    ok("out-of-range temperature returns 422", r.status_code == 422)

    r = await c.get("/api/history")
    ok("history without user returns 401", r.status_code == 401,
       f"status={r.status_code} (AUTH_DISABLED set?)")

    r = await c.get("/api/history?limit=500", headers={"x-user-id": "live"})
    ok("limit above 100 returns 422", r.status_code == 422)

    r = await c.get("/api/does-not-exist")
    ok("unknown route returns 404", r.status_code == 404)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

async def main():
    parser = argparse.ArgumentParser(description="Live test suite for the Prompt Pipeline API")
    parser.add_argument("--section", choices=["pipeline", "history", "errors", "all"],
                        default="all", help="Which sections to run")
    parser.add_argument("--base", default=BASE, help="Server base URL")
    args = parser.parse_args()

    print("=" * 60)
    print("  LIVE TEST SUITE -- Prompt Pipeline API")
    print("=" * 60)

    async with httpx.AsyncClient(base_url=args.base, headers=HEADERS, timeout=30) as c:

        # Pre-flight: make sure server is up
        try:
            r = await c.get("/health")
            if r.status_code != 200:
                print(f"\n  Server returned {r.status_code} on /health -- is it running?")
                sys.exit(2)
        except httpx.ConnectError:
            print(f"\n  Cannot connect to server at {args.base} -- is it running?")
            sys.exit(2)

        ctx: dict = {}
        if args.section in ("pipeline", "all"):
            await test_health(c)
            ctx = await test_pipeline(c)
            await test_batch(c)
        if args.section in ("history", "all"):
            await test_history(c, ctx)
        if args.section in ("errors", "all"):
            await test_error_handling(c)

    # Summary
    print(f"\n{'=' * 60}")
    print(f"  RESULTS: {PASS} passed, {FAIL} failed")
    print(f"{'=' * 60}")

    if ERRORS:
        print("\nFailures:")
        for e in ERRORS:
            print(f"  - {e}")

    sys.exit(0 if FAIL == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
