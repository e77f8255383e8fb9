import requests, csv, io

r = requests.get(
    "https://docs.google.com/spreadsheets/d/1n7oWCkQZM9bsEzBRhqRe6Ky3J7VfGa-gjhee-K1B7bk/export?format=csv&gid=1161513038",
    timeout=30
)
print(f"HTTP {r.status_code} {r.reason}")
r.encoding = "utf-8"
rows = [row for row in csv.reader(io.StringIO(r.text)) if row]

if not rows:
    print("Sheet is empty")
    raise SystemExit(1)

h = rows[0]
print(f"Total cols: {len(h)}, Total rows: {len(rows)}")
print()

for i, val in enumerate(h):
    print(f"  col {i}: {val!r}")

print()
year_i = h.index("Year") if "Year" in h else None
value_col = "Value added in the agricultural sector as percent of GDP"
value_i = h.index(value_col) if value_col in h else None
print(f"Year col: {year_i}, Value col: {value_i}")

print()
print("--- First 10 data rows ---")
for ri in range(1, min(11, len(rows))):
    row = rows[ri]
    year = row[year_i] if year_i is not None and year_i < len(row) else ""
    value = row[value_i] if value_i is not None and value_i < len(row) else ""
    print(f"  Row {ri}: year={year!r} value={value!r}")

print()
print("--- Last 5 data rows ---")
for row in rows[-5:]:
    print(f"  {row}")
