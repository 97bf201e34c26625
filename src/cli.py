"""Terminal client: scores a listing and prints a report.

Usage:
    score-listing "245 E 63rd St #12B, New York, NY" --price 1250000 --sqft 1000 --beds 2 --fees 1200
    score-listing "10 Jay St #5, Brooklyn, NY" --price 900000 --beds 1 --school-district "District 15" --local
"""

import argparse
import asyncio
import datetime
import sys
from decimal import Decimal, InvalidOperation

import httpx
from pydantic import ValidationError

from src.api.routes.score import score_request
from src.api.schemas import ScoreRequest
from src.config import settings


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def _bar(score, scale: int) -> str:
    filled = round(float(score) / scale * 20)
    return "#" * filled + "." * (20 - filled)


# ── Report sections ──────────────────────────────────────────────────────────

def print_overall(data: dict, payload: dict) -> None:
    _header("Listing Score")
    print(f"  Address:          {data['address']}")
    print(f"  Price:            {_dollar(payload['price'])}")
    print(f"  Overall:          {data['overall']}/{data['scale']}  ({data['rating']})")
    if data.get("confidence"):
        print(f"  Price Confidence: {data['confidence']}")


def print_subscores(data: dict) -> None:
    _header("Breakdown")
    scale = data["scale"]
    for sub in data["subscores"]:
        score = float(sub["score"])
        print(f"  {sub['label']:<16} {score:>5.1f}  {_bar(score, scale)}  {sub['rating']}")
        print(f"  {'':<16} {sub['description']}")


def print_price_history(payload: dict) -> None:
    details = payload.get("price_history_details")
    if not details:
        return
    _header("Price History")
    change = float(details["percentage_change"])
    print(f"  Change:           {change:+.1f}%  {details.get('time_context', '')}".rstrip())
    if details.get("analysis"):
        print(f"  Analysis:         {details['analysis']}")
    for event in details.get("events", [])[:3]:
        print(f"  {event['date']}  {_dollar(event['price']):>12}  {event['event']}")


# ── Scoring ──────────────────────────────────────────────────────────────────

def build_payload(args: argparse.Namespace) -> dict:
    """Request body from parsed arguments. Only non-None fields are sent."""
    payload: dict = {"address": args.address, "price": str(args.price)}

    field_map = {
        "fees": "monthly_fees",
        "taxes": "property_taxes",
        "assessment_ratio": "assessment_ratio",
        "sqft": "square_feet",
        "beds": "bedrooms",
        "baths": "bathrooms",
        "floor": "floor",
        "total_floors": "total_floors",
        "building_age": "building_age",
        "building_type": "building_type",
        "quality": "construction_quality",
        "renovation_year": "renovation_year",
        "school_district": "school_district",
        "neighborhood": "neighborhood",
        "walk_score": "walk_score",
        "transit_score": "transit_score",
        "bike_score": "bike_score",
        "park_minutes": "proximity_to_park",
        "subway_minutes": "proximity_to_subway",
        "safety": "safety_score",
        "parking": "parking_type",
        "outdoor": "outdoor_space",
        "days_on_market": "days_on_market",
        "price_history": "price_history",
        "market_trend": "market_trend",
        "noise_level": "noise_level",
        "scale": "scale",
    }
    for cli_name, api_name in field_map.items():
        val = getattr(args, cli_name)
        if val is not None:
            payload[api_name] = val if not isinstance(val, Decimal) else str(val)

    if args.amenity:
        payload["amenities"] = list(dict.fromkeys(args.amenity))
    if args.feature:
        payload["home_features"] = list(dict.fromkeys(args.feature))
    if args.has_parking:
        payload["has_parking"] = True
    if args.pets:
        payload["pet_friendly"] = True

    if args.price_change is not None:
        payload["price_history_details"] = {
            "percentage_change": str(args.price_change),
            "time_context": args.price_context or "",
            "analysis": args.price_analysis or "",
            "events": args.price_event or [],
        }
    return payload


def score_locally(payload: dict) -> dict:
    """Score in-process, returning the same shape the API would."""
    try:
        req = ScoreRequest.model_validate(payload)
    except ValidationError as e:
        print("Error: Invalid listing", file=sys.stderr)
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"])
            print(f"  {field}: {err['msg']}", file=sys.stderr)
        sys.exit(1)
    return score_request(req).model_dump(mode="json")


async def score_remote(payload: dict, api_url: str) -> dict:
    url = f"{api_url}/api/v1/score"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        return resp.json()


def print_report(data: dict, payload: dict) -> None:
    print_overall(data, payload)
    print_subscores(data)
    print_price_history(payload)
    print()


# ── Main ─────────────────────────────────────────────────────────────────────

def _price_event(value: str) -> dict:
    """Parse "DATE,PRICE,EVENT" into a price-history event."""
    parts = [p.strip() for p in value.split(",", 2)]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected DATE,PRICE,EVENT, got {value!r}")
    date, price, event = parts
    try:
        datetime.date.fromisoformat(date)
        Decimal(price)
    except (ValueError, InvalidOperation):
        raise argparse.ArgumentTypeError(f"bad date or price in {value!r}")
    return {"date": date, "price": price, "event": event}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score an NYC listing")
    parser.add_argument("address", help="Listing address")
    parser.add_argument("--price", type=Decimal, required=True, help="Asking price")
    parser.add_argument("--fees", type=Decimal, help="Monthly common charges / maintenance")
    parser.add_argument("--taxes", type=Decimal, help="Annual property tax")
    parser.add_argument("--sqft", type=int, help="Square footage (omit if unknown)")
    parser.add_argument("--beds", type=int, help="Bedrooms")
    parser.add_argument("--baths", type=Decimal, help="Bathrooms")
    parser.add_argument("--floor", type=int, help="Unit floor")
    parser.add_argument("--total-floors", type=int, help="Floors in building")
    parser.add_argument("--building-age", type=int, help="Building age in years")
    parser.add_argument(
        "--building-type",
        choices=["prewar", "postwar", "modern", "luxury", "historic", "other"],
        help="Building type",
    )
    parser.add_argument(
        "--quality",
        choices=["basic", "good", "luxury", "ultra-luxury"],
        help="Construction quality",
    )
    parser.add_argument("--renovation-year", type=int, help="Year of last renovation")
    parser.add_argument("--school-district", help='e.g. "District 2" or "Stuyvesant HS Zone"')
    parser.add_argument("--neighborhood", help="Neighborhood name (display only)")
    parser.add_argument("--walk-score", type=int, help="Walk score (0-100)")
    parser.add_argument("--transit-score", type=int, help="Transit score (0-100)")
    parser.add_argument("--bike-score", type=int, help="Bike score (0-100)")
    parser.add_argument("--park-minutes", type=Decimal, help="Minutes walk to nearest park")
    parser.add_argument("--subway-minutes", type=Decimal, help="Minutes walk to nearest subway")
    parser.add_argument("--safety", type=Decimal, help="Safety score (1-10)")
    parser.add_argument("--amenity", action="append", help="Building amenity (repeatable)")
    parser.add_argument("--feature", action="append", help="In-unit feature, e.g. Fireplace (repeatable)")
    parser.add_argument("--has-parking", action="store_true", help="Parking available (type unspecified)")
    parser.add_argument("--parking", choices=["garage", "assigned", "street", "none"], help="Parking type")
    parser.add_argument(
        "--outdoor",
        choices=["garden", "rooftop", "terrace", "balcony", "none"],
        help="Private outdoor space",
    )
    parser.add_argument("--assessment-ratio", type=Decimal, help="Assessed / market value")
    parser.add_argument("--days-on-market", type=int, help="Days listed")
    parser.add_argument(
        "--price-history",
        choices=["increased", "decreased", "stable"],
        help="Coarse price history (ignored when --price-change is given)",
    )
    parser.add_argument("--price-change", type=Decimal, help="Price change since listing, in percent")
    parser.add_argument("--price-context", help='Timeframe of the change, e.g. "over the last 3 weeks"')
    parser.add_argument("--price-analysis", help="Free-text note on the price history")
    parser.add_argument(
        "--price-event",
        type=_price_event,
        action="append",
        metavar="DATE,PRICE,EVENT",
        help='Price history event, e.g. "2024-02-15,1250000,Price decreased" (repeatable)',
    )
    parser.add_argument("--market-trend", choices=["hot", "warm", "cool", "cold"], help="Market trend")
    parser.add_argument("--noise-level", type=int, help="Noise level 1 (quiet) - 10")
    parser.add_argument("--pets", action="store_true", help="Building allows pets")
    parser.add_argument("--scale", type=int, choices=[10, 100], help="Display scale (default: 10)")
    parser.add_argument("--local", action="store_true", help="Score in-process instead of calling the API")
    parser.add_argument(
        "--api-url",
        default=settings.api_url,
        help=f"API base URL (default: {settings.api_url})",
    )
    return parser


async def run(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.price_event and args.price_change is None:
        parser.error("--price-event requires --price-change")
    payload = build_payload(args)

    if args.local:
        data = score_locally(payload)
    else:
        data = await score_remote(payload, args.api_url)

    print_report(data, payload)


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
