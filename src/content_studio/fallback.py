"""Static datasets served when a listing backend is unavailable.

Built once at import time from immutable types; nothing may modify them.
"""

from .models import ListingArticle, ListingResponse, TopicsResponse

FALLBACK_TOPICS = TopicsResponse(
    main_topics=(
        "indonesia",
        "world",
        "business",
        "technology",
        "entertainment",
        "sports",
        "science",
        "health",
    ),
    sub_topics=(
        "automotive",
        "football",
        "cryptocurrency",
    ),
)

_ARTICLES = (
    ListingArticle(
        date="2025-11-30",
        image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSg4zbBt7PHOWu8sNWOgo451K0o853_z8Qdc1vsCJfhXWUneA",
        source="Kompas",
        timestamp=1764460800000,
        title="Begini Cara Menghubungkan Perangkat dengan WiFi KAI Tanpa Password",
        url="https://www.kompas.com/tren/read/2025/12/03/050000965/begini-cara-menghubungkan-perangkat-dengan-wifi-kai-tanpa-password",
    ),
    ListingArticle(
        date="2025-12-02",
        image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQ2YyWRzgTaYXXlO4V7dMuii8pYZRQ50BFNScLUTcmeZujCIw",
        source="Cnnindonesia",
        timestamp=1764633600000,
        title="BMKG Kasih Peringatan, Waspada Cuaca Ekstrem Akhir Tahun",
        url="https://www.cnnindonesia.com/teknologi/20251202165647-641-1301965/bmkg-kasih-peringatan-waspada-cuaca-ekstrem-akhir-tahun",
    ),
    ListingArticle(
        date="2025-12-02",
        image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQZUOJQR7wfud0019CMsj6wMVIxI6VA0as0QnNdz8KCZif47A",
        source="Tirto",
        timestamp=1764633600000,
        title="Hasil Reuni 212 pada 2 Desember 2025 & Daftar Pejabat yang Hadir",
        url="https://tirto.id/hasil-reuni-212-pada-2-desember-2025-daftar-pejabat-yang-hadir-hm4d",
    ),
    ListingArticle(
        date="2025-12-01",
        image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcTiuIaPfl4411o_mOkyJGyBMdE7nNw-hSqJZ_FdkZz_-pMXng",
        source="Liputan6",
        timestamp=1764547200000,
        title="7 Tips Mengusir Anakan Ular yang Bersembunyi di Tumpukan Batu Kebun, Aman dan Efektif",
        url="https://www.liputan6.com/hot/read/6222161/7-tips-mengusir-anakan-ular-yang-bersembunyi-di-tumpukan-batu-kebun-aman-dan-efektif",
    ),
    ListingArticle(
        date="2025-11-27",
        image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQtHiLA1r5B7WfbZjmnwvP9oAYVJ5vJSRPZqHbgXnPYP21yJw",
        source="Market",
        timestamp=1764201600000,
        title="Nilai Tukar Rupiah terhadap Dolar AS Hari Ini, Rabu 3 Desember 2025",
        url="https://market.bisnis.com/read/20251203/93/1933732/nilai-tukar-rupiah-terhadap-dolar-as-hari-ini-rabu-3-desember-2025",
    ),
    ListingArticle(
        date="2025-12-03",
        image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSRiapqK39OSKuKvg2K86fsOwNT-PHvUFMimIo133GPphVRwA",
        source="Tribunnews",
        timestamp=1764720000000,
        title="Prajurit TNI Bawa Bantuan Lewati Rintangan untuk Warga Terisolir, Foto 6 #2029761",
        url="https://www.tribunnews.com/images/bencana/view/2029761/prajurit-tni-bawa-bantuan-lewati-medan-berat-untuk-warga-terisolir",
    ),
    ListingArticle(
        date="2025-12-04",
        image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcT8pqwBjg6hHDqD4Tx0Wcb9OOFAfOq_QzBWDqqBTDQ1cV4cWg",
        source="Suara",
        timestamp=1764806400000,
        title="Resmi Dibuka, Pusat Belanja Baru Ini Hadirkan Promo Menarik untuk Pengunjung",
        url="https://www.suara.com/lifestyle/2025/12/01/130119/resmi-dibuka-pusat-belanja-baru-ini-hadirkan-promo-menarik-untuk-pengunjung",
    ),
)

FALLBACK_ARTICLES = ListingResponse(
    articles=_ARTICLES,
    source="Google Discover API",
    status="success",
    total=len(_ARTICLES),
)
