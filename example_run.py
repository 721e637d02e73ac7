import logging

from filing_status import FilingStatus
from tax_calculator import TaxCalculator, income_schedule, to_dataframe

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

single = TaxCalculator.unmarried("Jane Doe", FilingStatus.SINGLE, 40)
single.gross_income = 50_000.0

couple = TaxCalculator.married("John and Mary Roe", FilingStatus.MARRIED_FILING_JOINTLY, 70, 66)
couple.gross_income = 85_000.0

for taxpayer in (single, couple):
    s = taxpayer.summary()
    print(
        f"{s.name} ({s.filing_status}): deduction {s.standard_deduction:,.2f}, "
        f"taxable {s.taxable_income:,.2f}, tax {s.tax_due:,.2f}, "
        f"net rate {s.net_tax_rate:.2f}%, return required: {s.return_required}"
    )
    for part in taxpayer.bracket_breakdown():
        if part.income > 0:
            print(f"    {part.bracket.rate:>5.0%} on {part.income:>12,.2f} = {part.tax:>10,.2f}")

# Gross incomes from 0 to 400k in 10k steps
rows = income_schedule(single, range(0, 400_001, 10_000))
df = to_dataframe(rows)
df.to_csv("example_output.csv")
print(df.head(10).to_string(index=False))
