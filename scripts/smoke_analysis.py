"""
Quick check that the analysis endpoints work end to end against a running server.
Run with: from project root, server must be running (uvicorn callinsight.main:app).
  python scripts/smoke_analysis.py
"""
import os

import requests

BASE = os.environ.get("CALLINSIGHT_BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 15

TRANSCRIPT = (
    "Agent: Thank you for calling, my name is Sarah. How can I help you today?\n"
    "Customer: Hi, my name is John Smith. I'm calling about my policy renewal.\n"
    "Agent: I understand. Let me check that for you, John. Could you confirm your date of birth?\n"
    "Customer: Sure, it's March third. Um, I also wanted to ask about the premium.\n"
    "Agent: Absolutely, I'd be happy to help with that. Is there anything else?"
)


def main():
    # 1. Health
    r = requests.get(f"{BASE}/health", timeout=TIMEOUT)
    assert r.status_code == 200, f"Health failed: {r.status_code}"
    print("OK /health")

    # 2. Vocalytics
    r = requests.post(f"{BASE}/analysis/vocalytics", json={"transcript": TRANSCRIPT}, timeout=TIMEOUT)
    assert r.status_code == 200, f"Vocalytics failed: {r.status_code} {r.text}"
    report = r.json()
    assert 0 <= report["overall_score"] <= 100
    assert report["insights"], "insights should never be empty"
    print("OK POST /analysis/vocalytics")
    print(f"  overall_score: {report['overall_score']} via {report['segmentation_method']}")
    print(f"  breakdown: {report['score_breakdown']}")

    # 3. Sentiment
    r = requests.post(f"{BASE}/analysis/sentiment", json={"transcript": TRANSCRIPT}, timeout=TIMEOUT)
    assert r.status_code == 200, f"Sentiment failed: {r.status_code} {r.text}"
    analysis = r.json()
    print("OK POST /analysis/sentiment")
    print(f"  overall_call_quality: {analysis['overall_call_quality']}")

    # 4. Prospect name
    r = requests.post(f"{BASE}/analysis/prospect-name", json={"transcript": TRANSCRIPT}, timeout=TIMEOUT)
    assert r.status_code == 200, f"Prospect name failed: {r.status_code} {r.text}"
    name = r.json()
    print("OK POST /analysis/prospect-name")
    print(f"  full_name: {name['full_name']!r} ({name['extraction_method']}, {name['confidence']})")

    r = requests.post(f"{BASE}/analysis/prospect-name/stats", json={"transcript": TRANSCRIPT}, timeout=TIMEOUT)
    assert r.status_code == 200, f"Name stats failed: {r.status_code} {r.text}"
    print(f"OK POST /analysis/prospect-name/stats -> {r.json()['total_candidates']} candidates")

    # 5. Coaching
    performance = {"communication_skills": 7, "problem_solving": 6, "product_knowledge": 8, "customer_service": 7}
    r = requests.post(
        f"{BASE}/analysis/coaching",
        json={"transcript": TRANSCRIPT, "agent_performance": performance},
        timeout=TIMEOUT,
    )
    assert r.status_code == 200, f"Coaching failed: {r.status_code} {r.text}"
    print(f"OK POST /analysis/coaching -> coaching_score {r.json()['coaching_score']}")

    r = requests.post(
        f"{BASE}/analysis/improvement-plan",
        json={"records": [{"overall_score": 7.0, "agent_performance": performance}]},
        timeout=TIMEOUT,
    )
    assert r.status_code == 200, f"Improvement plan failed: {r.status_code} {r.text}"
    plan = r.json()
    print(f"OK POST /analysis/improvement-plan -> {plan['current_score']} → {plan['target_score']}")

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
