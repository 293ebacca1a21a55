from src.service.quote_service import quote_from_payload

raw_request = {
    "model": "Camry",
    "year": "2012",
    "city": "Riyadh",
    "accidents": "1",
    "driver_age": "23",
}

resp, warnings = quote_from_payload(raw_request)

print("Warnings:", warnings)
print("fair_price:", resp.fair_price)
for offer in resp.offers:
    print(f"  {offer['company']:<8} {offer['modifier']:+.3f} -> {offer['price']}")
