import argparse
import json
import math
import random
from datetime import date, timedelta

from scoreline.domain.models import EntityLevel

parser = argparse.ArgumentParser(description="Generate a mock score API response for local runs")
parser.add_argument("--level", default="campaign", choices=[level.value for level in EntityLevel])
parser.add_argument("--days", type=int, default=30)
parser.add_argument("--gap-rate", type=float, default=0.2, help="Share of days with no score")
parser.add_argument("--seed", type=int, default=None)
parser.add_argument("--output", default="mock_scores.json")
args = parser.parse_args()

rng = random.Random(args.seed)
level = EntityLevel(args.level)
today = date.today()

scores = []
for i in range(args.days):
    if rng.random() < args.gap_rate:
        continue
    day = today - timedelta(days=args.days - i - 1)
    scores.append({
        "id": len(scores) + 1,
        "date": day.strftime("%d.%m.%Y"),
        "qs": round(min(10, max(1, 5 + math.sin(i * 0.3) * 3 + (rng.random() - 0.5))), 2),
        level.count_field: rng.randint(1, 20),
    })

envelope = {"success": True, "data": {"scores": scores, "total": len(scores)}, "statusCode": 200}
with open(args.output, "w", encoding="utf-8") as f:
    json.dump(envelope, f, indent=2)
print(f"Generated {args.output} ({len(scores)} {level.value} scores)")
