"""Demo consignment records in the shape served by the tracker API."""

DEMO_RECORDS: list[dict] = [
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d501"},
        "sr_id": "SR-2024-0101",
        "co_no": "CO-1001",
        "name_company": "Northwind Traders",
        "item_description": "Ceramic mugs, assorted",
        "qty_sold": "120",
        "amount": "₱ 18,000.00",
        "remaining_bal": "30",
        "inv_no": "INV-5501",
        "voucher_no": "V-9001",
        "voucher_date": "2024-07-02",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d502"},
        "sr_id": "SR-2024-0101",
        "co_no": "CO-1001",
        "name_company": "Northwind Traders",
        "item_description": "Ceramic plates",
        "qty_sold": "40",
        "amount": "₱ 6,400.00",
        "remaining_bal": "10",
        "inv_no": "INV-5501",
        "voucher_no": "V-9001",
        "voucher_date": "2024-07-02",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d503"},
        "sr_id": "SR-2024-0102",
        "co_no": "CO-1001",
        "name_company": "Northwind Traders",
        "item_description": "Glass tumblers",
        "qty_sold": "75",
        "amount": "₱ 5,625.50",
        "remaining_bal": "0",
        "inv_no": "INV-5502",
        "voucher_no": "0",
        "voucher_date": "-",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d504"},
        "sr_id": "SR-2024-0103",
        "co_no": "CO-1001",
        "name_company": "Northwind Traders",
        "item_description": "Serving trays",
        "qty_sold": "12",
        "amount": "₱ 2,160.00",
        "remaining_bal": "8",
        "inv_no": "-",
        "voucher_no": "",
        "voucher_date": "",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d505"},
        "sr_id": "SR-2024-0210",
        "co_no": "CO-1002",
        "name_company": "Blue Harbor Crafts",
        "item_description": "Woven baskets",
        "qty_sold": "1",
        "amount": "₱ 850.00",
        "remaining_bal": "24",
        "inv_no": "",
        "voucher_no": "",
        "voucher_date": "",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d506"},
        "sr_id": "SR-2024-0211",
        "co_no": "CO-1002",
        "name_company": "Blue Harbor Crafts",
        "item_description": "Rattan lamps",
        "qty_sold": "6",
        "amount": "₱ 7,200.00",
        "remaining_bal": "4",
        "inv_no": "INV-5610",
        "voucher_no": "V-9120",
        "voucher_date": "2024-08-15",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d507"},
        "sr_id": "SR-2024-0305",
        "co_no": "CO-1003",
        "name_company": "Sunrise Organics",
        "item_description": "Coconut sugar 500g",
        "qty_sold": "310",
        "amount": "₱ 23,250.00",
        "remaining_bal": "90",
        "inv_no": "INV-5702",
        "voucher_no": "-",
        "voucher_date": "-",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d508"},
        "sr_id": "SR-2024-0306",
        "co_no": "CO-1003",
        "name_company": "Sunrise Organics",
        "item_description": "Dried mango 200g",
        "qty_sold": "n/a",
        "amount": "",
        "remaining_bal": "150",
        "inv_no": "",
        "voucher_no": "",
        "voucher_date": "",
    },
    {
        "_id": {"$oid": "66a1f0c2e4b0a1a2b3c4d509"},
        "sr_id": "SR-2024-0401",
        "co_no": "CO-1004",
        "name_company": "Highland Weavers",
        "item_description": "Table runners",
        "qty_sold": 18,
        "amount": 5400,
        "remaining_bal": 2,
        "inv_no": "INV-5801",
        "voucher_no": "V-9302",
        "voucher_date": "2024-09-20",
    },
    {
        "_id": "66a1f0c2e4b0a1a2b3c4d510",
        "sr_id": "SR-2024-0402",
        "co_no": "CO-1004",
        "name_company": "Highland Weavers",
        "item_description": "Throw blankets",
        "qty_sold": "9",
        "amount": "₱ 8,100.00",
        "remaining_bal": "1",
        "inv_no": "",
        "voucher_no": "",
        "voucher_date": "",
    },
]
