from __future__ import annotations

from datetime import date

from newsdesk_webapp.app.models import Article, FilterOptions


_TECH = (
    "India is witnessing a technological revolution with cities like Bangalore, Hyderabad, and Pune emerging "
    "as major IT hubs. The adoption of artificial intelligence, machine learning, and blockchain technologies "
    "is transforming various sectors including healthcare, education, and finance."
)
_METRO = (
    "हैदराबाद मेट्रो रेल की नई लाइन का आज उद्घाटन हुआ। "
    "इससे शहर के यातायात की समस्या में काफी राहत मिलने की उम्मीद है।"
)
_AI = (
    "కృత్రిమ మేధస్సు రంగంలో భారతీయ కంపెనీలు కొత్త మైలురాయిని సాధించాయి. "
    "ఈ పరిజ్ఞానం ఆరోగ్య రంగంలో విప్లవాత్మక మార్పులను తీసుకురానుంది."
)
_EDUCATION = (
    "The Ministry of Education announced significant progress in implementing the New Education Policy across "
    "all states. Universities are adapting their curricula to meet the new guidelines."
)
_CLIMATE = (
    "World leaders concluded the climate summit with ambitious targets for carbon neutrality. India pledged "
    "to increase renewable energy capacity significantly by 2030."
)


def sample_public_articles() -> list[Article]:
    return [
        Article(1, "Technology Revolution in Indian Cities", _TECH, "National", "English", date(2024, 1, 15), featured=True),
        Article(2, "हैदराबाद में नई मेट्रो लाइन का उद्घाटन", _METRO, "Telangana", "Hindi", date(2024, 1, 14), featured=True),
        Article(3, "సాంకేతిక పరిజ్ఞానంలో కొత్త పురోగతి", _AI, "Andhra Pradesh", "Telugu", date(2024, 1, 13), featured=True),
        Article(4, "National Education Policy Implementation Update", _EDUCATION, "National", "English", date(2024, 1, 12)),
        Article(5, "Climate Change Summit Results", _CLIMATE, "National", "English", date(2024, 1, 11)),
    ]


def sample_admin_articles() -> list[Article]:
    return [
        Article(1, "Technology Revolution in Indian Cities", _TECH, "National", "English", date(2024, 1, 15), status="published"),
        Article(2, "हैदराबाद में नई मेट्रो लाइन का उद्घाटन", _METRO, "Telangana", "Hindi", date(2024, 1, 14), status="published"),
        Article(3, "Climate Change Summit Results", _CLIMATE, "National", "English", date(2024, 1, 11), status="draft"),
    ]


def default_filter_options() -> FilterOptions:
    return FilterOptions(
        regions=["National", "Andhra Pradesh", "Telangana", "Karnataka", "Tamil Nadu", "Kerala"],
        languages=["English", "Hindi", "Telugu", "Tamil", "Kannada", "Malayalam"],
    )


def default_admin_filter_options() -> FilterOptions:
    return FilterOptions(
        regions=["National", "Andhra Pradesh", "Telangana", "Karnataka", "Tamil Nadu", "Kerala", "Maharashtra", "Delhi"],
        languages=["English", "Hindi", "Telugu", "Tamil", "Kannada", "Malayalam", "Marathi"],
    )
