"""Quote models for each asset class, quote errors and the quote response map."""