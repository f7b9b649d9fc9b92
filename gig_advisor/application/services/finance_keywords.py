"""
Finance-domain keyword set used to gate which queries reach the model.

Matching is plain substring containment, so short terms ("cd", "apr", "rate")
also fire inside unrelated words. Recall is preferred over precision here.
"""

FINANCE_KEYWORDS: frozenset[str] = frozenset({
    "tax", "taxes", "deduction", "invoice", "income", "expense", "money", "payment",
    "salary", "wage", "pricing", "rate", "budget", "saving", "savings", "investment",
    "investments", "stock", "stocks", "market", "fund", "mutual fund", "etf", "portfolio",
    "retirement", "ira", "401k", "roth", "loan", "debt", "credit", "mortgage",
    "insurance", "premium", "financial", "finances", "banking", "bank", "interest",
    "billing", "accounting", "bookkeeping", "revenue", "profit", "loss", "net worth",
    "gig economy", "freelance", "self-employed", "independent contractor",
    "quarterly", "write-off", "mileage", "home office", "schedule c", "1099", "w9",
    "assets", "liabilities", "balance sheet", "cash flow", "roi", "return on investment",
    "tax planning", "wealth", "capital gain", "dividend", "income tax", "budgeting",
    "pension", "social security", "financial goals", "emergency fund", "tax refund",
    "credit score", "fico", "loan interest", "compound interest", "equity",
    "annuity", "bond", "bonds", "brokerage", "capital", "cash reserve", "commodities",
    "cryptocurrency", "bitcoin", "blockchain", "deficit", "depreciation", "diversification",
    "escrow", "estate planning", "fiduciary", "fixed income", "hedge fund", "index fund",
    "inflation", "leverage", "liquidity", "net income", "overdraft", "payroll", "refinancing",
    "risk management", "savings account", "tax bracket", "treasury", "trust fund",
    "venture capital", "yield", "amortization", "credit report", "foreclosure", "bankruptcy",
    "financial advisor", "tax return", "withholding", "expense tracking", "financial literacy",
    "stock option", "bear market", "bull market", "dividend yield", "market crash",
    "recession", "wealth management", "tax shelter", "offshore account", "money market",
    "certificate of deposit", "cd", "escrow account", "fiscal year", "gross income",
    "tax credit", "itemized deduction", "standard deduction", "capital loss", "short selling",
    "margin", "derivatives", "futures", "options trading", "private equity", "real estate",
    "rental income", "passive income", "crowdfunding", "peer-to-peer lending", "credit limit",
    "annual percentage rate", "apr", "credit union", "debit", "direct deposit", "wire transfer",
    "financial planner", "taxable income", "charitable contribution", "estate tax", "gift tax",
})
