from __future__ import annotations

import datetime as dt

# Inserted in this order when the table is empty, so the last row is the newest
SAMPLE_ARTICLES = [
    {
        "title": "Technology Revolution in Indian Cities",
        "content": (
            "India is witnessing a technological revolution with cities like Bangalore, Hyderabad, and Pune "
            "emerging as major IT hubs. The adoption of artificial intelligence, machine learning, and "
            "blockchain technologies is transforming various sectors including healthcare, education, and finance."
        ),
        "region": "National",
        "language": "English",
        "date": dt.date(2024, 1, 15),
        "status": "published",
    },
    {
        "title": "हैदराबाद में नई मेट्रो लाइन का उद्घाटन",
        "content": (
            "हैदराबाद मेट्रो रेल की नई लाइन का आज उद्घाटन हुआ। "
            "इससे शहर के यातायात की समस्या में काफी राहत मिलने की उम्मीद है।"
        ),
        "region": "Telangana",
        "language": "Hindi",
        "date": dt.date(2024, 1, 14),
        "status": "published",
    },
    {
        "title": "సాంకేతిక పరిజ్ఞానంలో కొత్త పురోగతి",
        "content": (
            "కృత్రిమ మేధస్సు రంగంలో భారతీయ కంపెనీలు కొత్త మైలురాయిని సాధించాయి. "
            "ఈ పరిజ్ఞానం ఆరోగ్య రంగంలో విప్లవాత్మక మార్పులను తీసుకురానుంది."
        ),
        "region": "Andhra Pradesh",
        "language": "Telugu",
        "date": dt.date(2024, 1, 13),
        "status": "published",
    },
    {
        "title": "National Education Policy Implementation Update",
        "content": (
            "The Ministry of Education announced significant progress in implementing the New Education Policy "
            "across all states. Universities are adapting their curricula to meet the new guidelines."
        ),
        "region": "National",
        "language": "English",
        "date": dt.date(2024, 1, 12),
        "status": "published",
    },
    {
        "title": "Climate Change Summit Results",
        "content": (
            "World leaders concluded the climate summit with ambitious targets for carbon neutrality. "
            "India pledged to increase renewable energy capacity significantly by 2030."
        ),
        "region": "National",
        "language": "English",
        "date": dt.date(2024, 1, 11),
        "status": "published",
    },
]
